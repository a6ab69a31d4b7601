"""In-memory cache with per-key expiry."""

from __future__ import annotations

import logging
import time
from typing import Any

logger = logging.getLogger(__name__)


class TTLCache:
    """Key/value store where every entry expires ``ttl`` seconds after it was set.

    There is no invalidation by write and no stale fallback: an expired entry
    is dropped on the next read and the caller is expected to refetch.
    """

    def __init__(self, ttl: int = 300) -> None:
        self.ttl = ttl
        self._items: dict[str, tuple[float, Any]] = {}  # key -> (expires_at, value)

    def get(self, key: str) -> Any | None:
        item = self._items.get(key)
        if not item:
            return None
        expires_at, value = item
        if time.time() >= expires_at:
            self._items.pop(key, None)
            logger.debug(f"Cache expired: {key}")
            return None
        return value

    def expires_at(self, key: str) -> float | None:
        """Expiry timestamp of a live entry, None if absent or expired."""
        if self.get(key) is None:
            return None
        return self._items[key][0]

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        ttl = self.ttl if ttl is None else ttl
        self._items[key] = (time.time() + max(1, ttl), value)

    def set_until(self, key: str, value: Any, expires_at: float) -> None:
        """Store ``value`` until an absolute ``time.time()`` timestamp."""
        self._items[key] = (expires_at, value)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
