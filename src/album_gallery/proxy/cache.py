"""
In-process TTL cache for caption results.
"""
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple


class TTLCache:
    """
    Dictionary cache whose entries expire ttl_seconds after they were set.

    Expired entries are evicted when read and swept on every write.
    Single-process only.
    """

    def __init__(self, ttl_seconds: float = 3600, clock: Callable[[], float] = time.monotonic):
        """
        :param ttl_seconds: Entry lifetime in seconds
        :param clock: Monotonic time source (injectable for tests)
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any) -> None:
        now = self._clock()
        self._sweep(now)
        self._entries[key] = (now, value)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at >= self.ttl_seconds]
        for k in expired:
            del self._entries[k]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None
