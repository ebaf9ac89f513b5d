"""Memcached cache implementation."""

import logging
from collections.abc import Sequence
from typing import Any

from pymemcache.client.base import Client
from pymemcache.exceptions import MemcacheError

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


class MemcacheCache(Cache):
    """Cache implementation using Memcached."""

    def __init__(self, client: Client):
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
        try:
            # noreply=False so that server-side failures are reported
            stored = self._client.set(key, payload, expire=0, noreply=False)
        except (MemcacheError, OSError) as e:
            logger.exception("Memcache set failed", extra={"key": key})
            raise CacheServiceError(key, "set", cause=e) from e
        if not stored:
            logger.error("Memcache set not stored", extra={"key": key})
            raise CacheServiceError(key, "set")
        logger.info("Cache set", extra={"key": key, "backend": "memcache"})

    def _get(self, key: str) -> bytes:
        try:
            value = self._client.get(key)
        except (MemcacheError, OSError) as e:
            logger.exception("Memcache get failed", extra={"key": key})
            raise CacheServiceError(key, "get", cause=e) from e
        if value is None:
            logger.info("Cache miss", extra={"key": key, "backend": "memcache"})
            raise KeyNotFoundError(key)
        logger.info("Cache hit", extra={"key": key, "backend": "memcache"})
        return value
