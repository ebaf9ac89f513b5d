"""Infrastructure layer exports."""

from infra_common.infrastructure.cache_wrapper import CacheWrapper, FallbackCache
from infra_common.infrastructure.memcache_cache import MemcacheCache
from infra_common.infrastructure.nsq_broker import (
    ConsumerState,
    NSQBroker,
    RegisteredConsumer,
)
from infra_common.infrastructure.redis_cache import RedisCache

__all__ = [
    "CacheWrapper",
    "ConsumerState",
    "FallbackCache",
    "MemcacheCache",
    "NSQBroker",
    "RedisCache",
    "RegisteredConsumer",
]
