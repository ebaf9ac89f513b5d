"""Connection configuration for cache and broker backends."""

import os

from pydantic import BaseModel


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration."""

    host: str
    port: str = "6379"


class MemcacheConfig(BaseModel, frozen=True):
    """Memcached connection configuration."""

    host: str
    port: str = "11211"


class NSQConfig(BaseModel, frozen=True):
    """NSQ connection configuration."""

    host: str
    tcp_port: str = "4150"
    http_port: str = "4161"
    channel: str = "channel"
    max_in_flight: int = 1
    processing_timeout: float = 30.0  # seconds per message

    @property
    def nsqd_address(self) -> str:
        return f"{self.host}:{self.tcp_port}"

    @property
    def lookupd_address(self) -> str:
        return f"{self.host}:{self.http_port}"


class AppConfig(BaseModel, frozen=True):
    """Root configuration."""

    redis: RedisConfig
    memcache: MemcacheConfig
    nsq: NSQConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "localhost"),
            port=os.getenv("REDIS_PORT", "6379"),
        ),
        memcache=MemcacheConfig(
            host=os.getenv("MEMCACHE_HOST", "localhost"),
            port=os.getenv("MEMCACHE_PORT", "11211"),
        ),
        nsq=NSQConfig(
            host=os.getenv("NSQ_HOST", "localhost"),
            tcp_port=os.getenv("NSQ_TCP_PORT", "4150"),
            http_port=os.getenv("NSQ_HTTP_PORT", "4161"),
            channel=os.getenv("NSQ_CHANNEL", "channel"),
            max_in_flight=int(os.getenv("NSQ_MAX_IN_FLIGHT", "1")),
            processing_timeout=float(os.getenv("NSQ_PROCESSING_TIMEOUT", "30")),
        ),
    )
