from dataclasses import dataclass, field, asdict
from typing import List, Optional


@dataclass
class AskResponse:
    answer: str
    provider: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CaptionResponse:
    caption: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"caption": self.caption, "tags": list(self.tags)}


@dataclass
class ImageCaption:
    index: int
    src: str
    caption: str
    tags: List[str]
    cached: bool


@dataclass
class AlbumCaptions:
    items: List[ImageCaption]
    tags: List[str]


@dataclass
class ChatReply:
    kind: str  # "answer", "clarify" or "error"
    text: str
    topic_label: str = "Assistant"
    choices: Optional[List[dict]] = None
