"""
Tests for the prediction cache.
"""

import pytest

from eumenides.cache import PredictionCache
from eumenides.schemas.verdict import ToxicityVerdict


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def _verdict(confidence=0.9):
    return ToxicityVerdict(is_toxic=True, confidence=confidence, categories=("insult",))


class TestPredictionCache:

    @pytest.mark.asyncio
    async def test_miss_then_hit(self, clock):
        cache = PredictionCache(clock=clock)
        assert await cache.get("hello") is None
        await cache.put("hello", _verdict())
        assert await cache.get("hello") == _verdict()
        assert cache.stats["hits"] == 1
        assert cache.stats["misses"] == 1
        assert cache.stats["hit_rate"] == 0.5

    @pytest.mark.asyncio
    async def test_expires_after_ttl(self, clock):
        cache = PredictionCache(ttl_seconds=300, clock=clock)
        await cache.put("hello", _verdict())
        clock.now += 300
        assert await cache.get("hello") is not None
        clock.now += 1
        assert await cache.get("hello") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_evicts_oldest_when_full(self, clock):
        cache = PredictionCache(max_entries=2, clock=clock)
        await cache.put("a", _verdict(0.1))
        clock.now += 1
        await cache.put("b", _verdict(0.2))
        clock.now += 1
        await cache.put("c", _verdict(0.3))
        assert len(cache) == 2
        assert await cache.get("a") is None
        assert (await cache.get("c")).confidence == 0.3

    @pytest.mark.asyncio
    async def test_overwrite_does_not_evict(self, clock):
        cache = PredictionCache(max_entries=2, clock=clock)
        await cache.put("a", _verdict(0.1))
        await cache.put("b", _verdict(0.2))
        await cache.put("a", _verdict(0.5))
        assert len(cache) == 2
        assert (await cache.get("a")).confidence == 0.5
        assert await cache.get("b") is not None

    @pytest.mark.asyncio
    async def test_invalidate_and_clear(self, clock):
        cache = PredictionCache(clock=clock)
        await cache.put("a", _verdict())
        await cache.put("b", _verdict())
        await cache.invalidate("a")
        assert await cache.get("a") is None
        await cache.clear()
        assert len(cache) == 0

    def test_keys_are_sha256(self):
        key = PredictionCache._make_key("hello")
        assert len(key) == 64
        assert key != PredictionCache._make_key("hellp")

    def test_defaults(self):
        stats = PredictionCache().stats
        assert stats["max_entries"] == 100
        assert stats["ttl_seconds"] == 300
        assert stats["hit_rate"] == 0.0

    def test_key_for_lone_surrogate(self):
        key = PredictionCache._make_key("abc \ud83d")
        assert len(key) == 64
        assert key != PredictionCache._make_key("abc \ud83e")

    @pytest.mark.asyncio
    async def test_lone_surrogate_round_trip(self, clock):
        cache = PredictionCache(clock=clock)
        await cache.put("abc \ud83d", _verdict())
        assert await cache.get("abc \ud83d") == _verdict()
