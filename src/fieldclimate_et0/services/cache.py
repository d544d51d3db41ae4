"""
In-memory response cache with a fixed time-to-live.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional


@dataclass
class CachedResponse:
    data: Any
    expires_at: float


class ResponseCache:
    """Keyed store whose entries expire ttl_seconds after they are set."""

    def __init__(self, ttl_seconds: float = 300, clock: Optional[Callable[[], float]] = None):
        """
        Initialize response cache.

        Args:
            ttl_seconds: Entry lifetime; 0 or less disables caching
            clock: Monotonic time source
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: Dict[Hashable, CachedResponse] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        if not self.enabled:
            return None
        cached = self._entries.get(key)
        if cached is None:
            return None
        if cached.expires_at <= self._clock():
            del self._entries[key]
            return None
        return cached.data

    def set(self, key: Hashable, data: Any) -> None:
        if not self.enabled:
            return
        self._entries[key] = CachedResponse(data=data, expires_at=self._clock() + self.ttl_seconds)

    def get_or_fetch(self, key: Hashable, fetch: Callable[[], Any]) -> Any:
        """Return the cached value or call fetch() and cache its result."""
        cached = self.get(key)
        if cached is not None:
            return cached
        data = fetch()
        self.set(key, data)
        return data

    def invalidate(self, key: Hashable) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
