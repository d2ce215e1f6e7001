"""
Prediction Cache

In-memory TTL cache for secondary-classifier verdicts.
Key = SHA-256(text). TTL = 5 minutes, at most 100 entries.

Only the verdict is cached, never the blended result: the blend is
recomputed on every call, so a hit returns exactly what a fresh
prediction would have produced. Safe under concurrent coroutines via
an asyncio lock.

Usage:
    cache = PredictionCache()
    verdict = await cache.get(text)
    if verdict is None:
        verdict = await classifier.predict(text)
        await cache.put(text, verdict)
"""

from __future__ import annotations

import asyncio
import hashlib
import time
from typing import Callable, Optional

from eumenides.config import settings
from eumenides.schemas.verdict import ToxicityVerdict


class PredictionCache:
    """In-memory cache with TTL expiry and oldest-first eviction."""

    def __init__(
        self,
        ttl_seconds: float = settings.CACHE_TTL_SECONDS,
        max_entries: int = settings.CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._cache: dict[str, tuple[float, ToxicityVerdict]] = {}
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _make_key(text: str) -> str:
        return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()

    async def get(self, text: str) -> Optional[ToxicityVerdict]:
        """Return the cached verdict if present and not expired."""
        key = self._make_key(text)
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            ts, verdict = entry
            if self._clock() - ts > self._ttl:
                del self._cache[key]
                self._misses += 1
                return None

            self._hits += 1
            return verdict

    async def put(self, text: str, verdict: ToxicityVerdict) -> None:
        """Store a verdict. Evicts the oldest entry when full."""
        key = self._make_key(text)
        async with self._lock:
            if key not in self._cache and len(self._cache) >= self._max_entries:
                oldest_key = min(
                    self._cache, key=lambda k: self._cache[k][0],
                )
                del self._cache[oldest_key]

            self._cache[key] = (self._clock(), verdict)

    async def invalidate(self, text: str) -> None:
        key = self._make_key(text)
        async with self._lock:
            self._cache.pop(key, None)

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def stats(self) -> dict:
        """Cache hit/miss statistics."""
        total = self._hits + self._misses
        return {
            "entries": len(self._cache),
            "max_entries": self._max_entries,
            "ttl_seconds": self._ttl,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total, 3) if total > 0 else 0.0,
        }
