"""Redis cache implementation."""

import logging
from collections.abc import Sequence
from typing import Any

import redis

from infra_common.exceptions import CacheServiceError, KeyNotFoundError
from infra_common.infrastructure.interfaces import Cache
from infra_common.infrastructure.serialization import (
    decode_multiple,
    decode_single,
    encode_multiple,
    encode_single,
)
from infra_common.scope import Scope, check_scope

logger = logging.getLogger(__name__)


class RedisCache(Cache):
    """Cache implementation using Redis."""

    def __init__(self, client: redis.Redis):
        self._client = client

    def set_single(self, key: str, value: Any, scope: Scope | None = None) -> None:
        check_scope(scope)
        self._set(key, encode_single(key, value))

    def get_single(self, key: str, scope: Scope | None = None) -> Any:
        check_scope(scope)
        return decode_single(key, self._get(key))

    def set_multiple(
        self, key: str, values: Sequence[Any], scope: Scope | None = None
    ) -> None:
        check_scope(scope)
        self._set(key, encode_multiple(key, values))

    def get_multiple(self, key: str, scope: Scope | None = None) -> list[Any]:
        check_scope(scope)
        return decode_multiple(key, self._get(key))

    def _set(self, key: str, payload: bytes) -> None:
        """
        Writes raw bytes with no expiration.

        Raises:
            CacheServiceError: If the Redis operation fails.
        """
        try:
            self._client.set(key, payload)
            logger.info("Cache set", extra={"key": key, "backend": "redis"})
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise CacheServiceError(key, "set", cause=e) from e

    def _get(self, key: str) -> bytes:
        """
        Reads raw bytes.

        Raises:
            KeyNotFoundError: If the key is absent.
            CacheServiceError: If the Redis operation fails.
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            logger.exception("Redis get failed", extra={"key": key})
            raise CacheServiceError(key, "get", cause=e) from e
        if value is None:
            logger.info("Cache miss", extra={"key": key, "backend": "redis"})
            raise KeyNotFoundError(key)
        logger.info("Cache hit", extra={"key": key, "backend": "redis"})
        return value
