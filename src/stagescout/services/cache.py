"""In-memory TTL cache sitting in front of the source scrapers."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from stagescout.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    """A cached value and the clock reading at which it expires."""

    key: str
    value: Any
    expires_at: float


class TTLCache:
    """
    Keyed store whose entries expire a fixed time after they are written.

    One instance is shared by the whole process. There is no lock: two
    concurrent misses on the same key both fetch and the last write wins,
    which wastes a request but never corrupts an entry.

    Failed fetches return empty lists and those are cached like any other
    result, so an upstream outage is remembered for the full TTL.
    """

    def __init__(self, ttl_seconds: float | None = None, clock: Clock = time.monotonic) -> None:
        """
        Initialize the cache.

        Args:
            ttl_seconds: Lifetime of each entry (uses settings if not provided)
            clock: Monotonic time source in seconds, injectable for tests
        """
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        """Return the live entry for key, evicting it if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry

    def set(self, key: str, value: Any, ttl: float | None = None) -> CacheEntry:
        """Store value under key, replacing any existing entry."""
        lifetime = ttl if ttl is not None else self.ttl_seconds
        entry = CacheEntry(key=key, value=value, expires_at=self.clock() + lifetime)
        self._entries[key] = entry
        return entry

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    async def get_or_fetch(self, key: str, fetch_fn: Callable[[], Awaitable[list[T]]]) -> list[T]:
        """
        Return the cached list for key, fetching and storing it on a miss.

        Args:
            key: Cache key ("listing" or "reference")
            fetch_fn: Coroutine function producing the records

        Returns:
            Cached or freshly fetched records (possibly empty)
        """
        entry = self.get(key)
        if entry is not None:
            logger.debug(f"Cache hit for '{key}'")
            return entry.value

        logger.info(f"Cache miss for '{key}', fetching")
        value = await fetch_fn()
        self.set(key, value)
        return value
