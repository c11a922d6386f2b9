"""Two-tier memoization of resolved declarations."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from class2css.model import CacheStats, ResolvedDeclaration
from class2css.types.config import CacheConfig

logger = logging.getLogger(__name__)

type CacheValue = tuple[ResolvedDeclaration, ...]
type Clock = Callable[[], float]


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One cached value with its insertion time and time-to-live."""

    key: str
    value: CacheValue
    created_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now - self.created_at > self.ttl


class _Tier:
    """Capacity-bounded map evicting in insertion order."""

    def __init__(self, capacity: int, ttl: float) -> None:
        self.capacity = capacity
        self.ttl = ttl
        self.entries: dict[str, CacheEntry] = {}

    def insert(self, entry: CacheEntry) -> int:
        """Store *entry*, returning how many entries were evicted to make room."""
        evicted = 0
        # Re-inserting refreshes the insertion position.
        self.entries.pop(entry.key, None)
        while self.entries and len(self.entries) >= self.capacity:
            oldest = next(iter(self.entries))
            del self.entries[oldest]
            evicted += 1
        if self.capacity > 0:
            self.entries[entry.key] = entry
        return evicted

    def sweep(self, now: float) -> int:
        stale = [key for key, entry in self.entries.items() if entry.is_expired(now)]
        for key in stale:
            del self.entries[key]
        return len(stale)


class ResultCache:
    """Hot + warm cache keyed by class token identity.

    ``get`` checks hot first and promotes warm hits into hot; ``put`` writes
    both tiers. Expired entries are dropped lazily on read and eagerly by
    :meth:`evict_expired`. The cache is purely additive: a miss only costs a
    recomputation.
    """

    def __init__(self, config: CacheConfig | None = None, *, clock: Clock = time.monotonic) -> None:
        config = config or CacheConfig()
        self._clock = clock
        self._hot = _Tier(config.hot_capacity, config.hot_ttl_seconds)
        self._warm = _Tier(config.warm_capacity, config.warm_ttl_seconds)
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def get(self, key: str) -> CacheValue | None:
        now = self._clock()
        value = self._lookup(self._hot, key, now)
        if value is not None:
            self._hits += 1
            return value

        value = self._lookup(self._warm, key, now)
        if value is not None:
            self._hits += 1
            self._evictions += self._hot.insert(CacheEntry(key, value, now, self._hot.ttl))
            return value

        self._misses += 1
        return None

    def put(self, key: str, value: CacheValue, ttl: float | None = None) -> None:
        """Store *value* in both tiers; *ttl* overrides each tier's default."""
        now = self._clock()
        for tier in (self._hot, self._warm):
            entry = CacheEntry(key, value, now, tier.ttl if ttl is None else ttl)
            self._evictions += tier.insert(entry)

    def invalidate_all(self) -> None:
        cleared = len(self._hot.entries) + len(self._warm.entries)
        self._hot.entries.clear()
        self._warm.entries.clear()
        logger.debug("Result cache cleared (%d entries)", cleared)

    def evict_expired(self) -> int:
        """Remove every expired entry from both tiers; returns the count removed."""
        now = self._clock()
        removed = self._hot.sweep(now) + self._warm.sweep(now)
        self._expirations += removed
        if removed:
            logger.debug("Result cache sweep removed %d expired entries", removed)
        return removed

    def __contains__(self, key: str) -> bool:
        return key in self._hot.entries or key in self._warm.entries

    def __len__(self) -> int:
        return len(self._hot.entries.keys() | self._warm.entries.keys())

    def stats(self) -> CacheStats:
        return CacheStats(
            hot_size=len(self._hot.entries),
            warm_size=len(self._warm.entries),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            expirations=self._expirations,
        )

    def _lookup(self, tier: _Tier, key: str, now: float) -> CacheValue | None:
        entry = tier.entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(now):
            del tier.entries[key]
            self._expirations += 1
            return None
        return entry.value
