from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class MediaType(Enum):
    IMAGE = "image"
    VIDEO = "video"
    YOUTUBE = "youtube"


@dataclass(frozen=True)
class MediaItem:
    type: MediaType
    src: str


@dataclass(frozen=True)
class Album:
    id: str
    title: str
    cover: str
    description: str
    tags: Tuple[str, ...]
    media: Tuple[MediaItem, ...]

    @property
    def has_video(self) -> bool:
        return any(item.type != MediaType.IMAGE for item in self.media)

    def images(self) -> Tuple[Tuple[int, MediaItem], ...]:
        """(index, item) pairs for image media, in album order."""
        return tuple(
            (index, item) for index, item in enumerate(self.media)
            if item.type == MediaType.IMAGE
        )
