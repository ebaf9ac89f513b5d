from infra_common.config import (
    AppConfig,
    MemcacheConfig,
    NSQConfig,
    RedisConfig,
    load_config,
)
from infra_common.dependencies import (
    new_cache,
    new_memcache_cache,
    new_nsq_client,
    new_redis_cache,
)
from infra_common.exceptions import (
    BrokerConnectionError,
    CacheServiceError,
    ConsumeMissingError,
    DeserializationError,
    KeyNotFoundError,
    PublishError,
    ScopeExpiredError,
    SerializationError,
)
from infra_common.logging import setup_logging
from infra_common.models import DeliveredMessage, NsqEvent
from infra_common.scope import Scope

__all__ = [
    "setup_logging",
    "load_config",
    "AppConfig",
    "MemcacheConfig",
    "NSQConfig",
    "RedisConfig",
    "new_cache",
    "new_memcache_cache",
    "new_nsq_client",
    "new_redis_cache",
    "BrokerConnectionError",
    "CacheServiceError",
    "ConsumeMissingError",
    "DeserializationError",
    "KeyNotFoundError",
    "PublishError",
    "ScopeExpiredError",
    "SerializationError",
    "DeliveredMessage",
    "NsqEvent",
    "Scope",
]
