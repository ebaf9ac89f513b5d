"""Constructors wiring backend clients into the capability interfaces."""

import logging

from infra_common.config import NSQConfig
from infra_common.infrastructure import (
    CacheWrapper,
    MemcacheCache,
    NSQBroker,
    RedisCache,
)
from infra_common.infrastructure.interfaces import Cache, MessageBroker
from infra_common.memcache import get_memcache_client
from infra_common.nsq import get_lookupd_client, get_nsq_producer
from infra_common.redis import get_redis_client

logger = logging.getLogger(__name__)


def new_redis_cache(host: str, port: str) -> Cache:
    """Returns a Redis-backed cache on database 0 without a password."""
    return RedisCache(get_redis_client(host, port))


def new_memcache_cache(host: str, port: str) -> Cache:
    """Returns a Memcached-backed cache."""
    return MemcacheCache(get_memcache_client(host, port))


def new_cache(cache: Cache) -> Cache:
    """Wraps any cache so that behavior can be layered over it."""
    return CacheWrapper(cache)


def new_nsq_client(config: NSQConfig) -> MessageBroker:
    """
    Creates an NSQ broker client.

    The producer publishes to nsqd at host:tcp_port; consumers discover
    nsqd nodes through nsqlookupd at host:http_port.

    Raises:
        BrokerConnectionError: If the producer cannot be started.
    """
    producer = get_nsq_producer(config.nsqd_address)
    lookupd = get_lookupd_client(config.lookupd_address)
    logger.info(
        "NSQ client created",
        extra={"nsqd": config.nsqd_address, "lookupd": config.lookupd_address},
    )
    return NSQBroker(producer, lookupd, config)
