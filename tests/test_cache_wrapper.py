"""Unit tests for cache decorators."""

from unittest.mock import MagicMock

import pytest

from infra_common.exceptions import CacheServiceError, KeyNotFoundError
from infra_common.infrastructure import (
    CacheWrapper,
    FallbackCache,
    MemcacheCache,
    RedisCache,
)
from infra_common.infrastructure.interfaces import Cache


@pytest.mark.unit
class TestCacheWrapper:
    def test_forwards_every_operation(self):
        inner = MagicMock(spec=Cache)
        inner.get_single.return_value = {"a": 1}
        inner.get_multiple.return_value = [1, 2]
        cache = CacheWrapper(inner)

        cache.set_single("k", {"a": 1})
        cache.set_multiple("m", [1, 2])

        assert cache.get_single("k") == {"a": 1}
        assert cache.get_multiple("m") == [1, 2]
        inner.set_single.assert_called_once_with("k", {"a": 1}, scope=None)
        inner.set_multiple.assert_called_once_with("m", [1, 2], scope=None)

    def test_errors_propagate_unchanged(self):
        inner = MagicMock(spec=Cache)
        inner.get_single.side_effect = KeyNotFoundError("k")

        with pytest.raises(KeyNotFoundError):
            CacheWrapper(inner).get_single("k")

    def test_wraps_a_real_adapter(self, redis_client):
        cache = CacheWrapper(RedisCache(redis_client))

        cache.set_single("user:1", {"name": "a"})

        assert cache.get_single("user:1") == {"name": "a"}
        assert isinstance(cache.wrapped, RedisCache)


@pytest.mark.unit
class TestFallbackCache:
    @pytest.fixture
    def tiers(self, memcache_client, redis_client):
        primary_client = memcache_client
        secondary_client = redis_client
        cache = FallbackCache(
            MemcacheCache(primary_client), RedisCache(secondary_client)
        )
        return cache, primary_client, secondary_client

    def test_writes_reach_both_tiers(self, tiers):
        cache, primary_client, secondary_client = tiers

        cache.set_single("k", {"v": 1})

        assert primary_client.data["k"] == b'{"v": 1}'
        assert secondary_client.data["k"] == b'{"v": 1}'

    def test_primary_miss_reads_secondary_and_backfills(self, tiers):
        cache, primary_client, secondary_client = tiers
        secondary_client.data["k"] = b"[1, 2]"

        assert cache.get_multiple("k") == [1, 2]
        assert primary_client.data["k"] == b"[1, 2]"

    def test_miss_in_both_tiers_raises(self, tiers):
        cache, _, _ = tiers

        with pytest.raises(KeyNotFoundError):
            cache.get_single("absent")

    def test_primary_failure_does_not_fall_back(self, failing_memcache_client):
        secondary = MagicMock(spec=Cache)
        cache = FallbackCache(MemcacheCache(failing_memcache_client), secondary)

        with pytest.raises(CacheServiceError):
            cache.get_single("k")

        secondary.get_single.assert_not_called()

    def test_secondary_write_failure_leaves_primary_written(
        self, memcache_client, failing_redis_client
    ):
        cache = FallbackCache(
            MemcacheCache(memcache_client), RedisCache(failing_redis_client)
        )

        with pytest.raises(CacheServiceError):
            cache.set_single("k", {"v": 1})

        assert memcache_client.data["k"] == b'{"v": 1}'
