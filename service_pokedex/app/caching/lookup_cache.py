"""
Bounded, time-expiring cache in front of the PokeAPI fetch path.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Optional, TYPE_CHECKING

from cachetools import TTLCache

from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector
    from ..domain.models import PokemonSummary


DEFAULT_MAX_ENTRIES = 200
DEFAULT_TTL_SECONDS = 600.0
CACHE_TYPE = "pokemon"


class LookupCache:
    """LRU cache with a fixed time-to-live measured from write.

    Keys are lower-cased so case variants share a single entry. Concurrent
    misses for the same key are collapsed into one in-flight computation
    (single-flight); the lock only guards the entry and pending tables and is
    never held while the computation runs. Failed computations are not stored.
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        *,
        metrics: Optional["MetricsCollector"] = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self.metrics = metrics
        self.logger = get_logger("pokedex.lookup_cache")

        self._entries: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)
        self._pending: Dict[str, "asyncio.Task[PokemonSummary]"] = {}
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def normalize_key(key: str) -> str:
        return key.lower()

    def _record_access(self, hit: bool) -> None:
        if hit:
            self._hits += 1
        else:
            self._misses += 1
        if self.metrics:
            metric = "cache_hits_total" if hit else "cache_misses_total"
            self.metrics.increment_counter(metric, cache_type=CACHE_TYPE)

    async def get(self, key: str) -> Optional["PokemonSummary"]:
        """Return the live entry for key, or None when absent or expired."""
        async with self._lock:
            return self._entries.get(self.normalize_key(key))

    async def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Awaitable["PokemonSummary"]],
    ) -> "PokemonSummary":
        """Return the cached value for key, computing and storing it on a miss.

        The failure of compute propagates to every caller waiting on it and
        leaves the cache untouched.
        """
        normalized = self.normalize_key(key)

        async with self._lock:
            cached = self._entries.get(normalized)
            if cached is not None:
                self._record_access(hit=True)
                self.logger.debug("Cache hit", key=normalized)
                return cached

            task = self._pending.get(normalized)
            if task is None:
                self._record_access(hit=False)
                self.logger.debug("Cache miss", key=normalized)
                task = asyncio.ensure_future(self._compute_and_store(normalized, compute))
                task.add_done_callback(self._consume_result)
                self._pending[normalized] = task
            else:
                self.logger.debug("Joining in-flight lookup", key=normalized)

        # A cancelled caller must not cancel the fetch other callers share
        return await asyncio.shield(task)

    @staticmethod
    def _consume_result(task: "asyncio.Task[PokemonSummary]") -> None:
        # Every waiter may be cancelled before the shared task settles
        if not task.cancelled():
            task.exception()

    async def _compute_and_store(
        self,
        key: str,
        compute: Callable[[], Awaitable["PokemonSummary"]],
    ) -> "PokemonSummary":
        stored = False
        try:
            value = await compute()
            async with self._lock:
                self._entries[key] = value
                self._pending.pop(key, None)
                stored = True
            self.logger.debug("Cached value", key=key, ttl=self.ttl_seconds)
            return value
        finally:
            if not stored:
                async with self._lock:
                    self._pending.pop(key, None)

    async def invalidate(self, key: str) -> bool:
        """Drop a single entry. Returns True if one was present."""
        async with self._lock:
            return self._entries.pop(self.normalize_key(key), None) is not None

    async def clear(self) -> int:
        """Drop every entry and return how many were removed."""
        async with self._lock:
            self._entries.expire()
            count = len(self._entries)
            self._entries.clear()
        self.logger.info("Cleared lookup cache", keys_count=count)
        return count

    async def size(self) -> int:
        async with self._lock:
            self._entries.expire()
            return len(self._entries)

    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        async with self._lock:
            self._entries.expire()
            return {
                "size": len(self._entries),
                "max_entries": self.max_entries,
                "ttl_seconds": self.ttl_seconds,
                "hits": self._hits,
                "misses": self._misses,
                "in_flight": len(self._pending),
            }
