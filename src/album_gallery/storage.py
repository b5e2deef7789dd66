"""
Client-side key/value stores.

Mirrors the browser's localStorage/sessionStorage: string keys, string values,
no transactions. Stores built on top degrade to empty values when the stored
JSON is missing or corrupt.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

logger = logging.getLogger(__name__)

CAPTION_PREFIX = "cap:"
AI_TAGS_PREFIX = "ai-tags:"
CHAT_TOPIC_KEY = "chat_topic"


class KeyValueStorage(Protocol):
    """Protocol for a string key/value storage backend."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage (sessionStorage analogue)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class JsonFileStorage:
    """
    File-backed storage (localStorage analogue).

    The whole mapping is rewritten on every change. A missing or unreadable
    file is treated as empty.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: not a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()


def _read_json(storage: KeyValueStorage, key: str):
    raw = storage.get_item(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug(f"Corrupt JSON under {key}, treating as empty")
        return None


class CaptionStore:
    """Caption results keyed by image URL. Entries never expire."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def get(self, image_url: str) -> Optional[dict]:
        value = _read_json(self._storage, CAPTION_PREFIX + image_url)
        return value if isinstance(value, dict) else None

    def set(self, image_url: str, value: dict) -> None:
        self._storage.set_item(CAPTION_PREFIX + image_url, json.dumps(value))


def dedupe_tags(tags: Optional[Iterable]) -> List[str]:
    """Trim, drop empties and deduplicate, keeping first occurrence order."""
    seen = []
    for tag in tags or []:
        text = str(tag).strip()
        if text and text not in seen:
            seen.append(text)
    return seen


class AITagStore:
    """AI-derived tags per album, merged into search."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def get(self, album_id: str) -> List[str]:
        value = _read_json(self._storage, AI_TAGS_PREFIX + album_id)
        if not isinstance(value, list):
            return []
        return [str(tag) for tag in value]

    def set(self, album_id: str, tags: Optional[Iterable]) -> None:
        self._storage.set_item(AI_TAGS_PREFIX + album_id, json.dumps(dedupe_tags(tags)))


class ChatTopicStore:
    """Last detected conversation topic."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def get(self) -> str:
        return self._storage.get_item(CHAT_TOPIC_KEY) or ""

    def set(self, topic: Optional[str]) -> None:
        self._storage.set_item(CHAT_TOPIC_KEY, topic or "")
