"""Decorators layering extra behavior over any Cache."""

import logging
from collections.abc import Sequence
from typing import Any

from infra_common.exceptions import KeyNotFoundError
from infra_common.infrastructure.interfaces import Cache
from infra_common.scope import Scope

logger = logging.getLogger(__name__)


class CacheWrapper(Cache):
    """
    Owns a wrapped Cache and forwards every call to it.

    Subclasses override the operations they decorate and call `super()`
    for the rest.
    """

    def __init__(self, cache: Cache):
        self._cache = cache

    @property
    def wrapped(self) -> Cache:
        return self._cache

    def set_single(self, key: str, value: Any, scope: Scope | None = None) -> None:
        self._cache.set_single(key, value, scope=scope)

    def get_single(self, key: str, scope: Scope | None = None) -> Any:
        return self._cache.get_single(key, scope=scope)

    def set_multiple(
        self, key: str, values: Sequence[Any], scope: Scope | None = None
    ) -> None:
        self._cache.set_multiple(key, values, scope=scope)

    def get_multiple(self, key: str, scope: Scope | None = None) -> list[Any]:
        return self._cache.get_multiple(key, scope=scope)


class FallbackCache(CacheWrapper):
    """
    Two-tier cache: reads try the primary tier first.

    On a primary miss the secondary tier is read and the value is written
    back to the primary. Writes go to both tiers, primary first. Only
    KeyNotFoundError triggers the fallback; other errors propagate.

    Writes are not atomic across tiers. If the secondary write fails, the
    primary already holds the new value and the tiers disagree until the
    key is written again.
    """

    def __init__(self, primary: Cache, secondary: Cache):
        super().__init__(primary)
        self._secondary = secondary

    def set_single(self, key: str, value: Any, scope: Scope | None = None) -> None:
        super().set_single(key, value, scope=scope)
        self._secondary.set_single(key, value, scope=scope)

    def get_single(self, key: str, scope: Scope | None = None) -> Any:
        try:
            return super().get_single(key, scope=scope)
        except KeyNotFoundError:
            logger.info("Primary tier miss, reading secondary", extra={"key": key})
        value = self._secondary.get_single(key, scope=scope)
        super().set_single(key, value, scope=scope)
        return value

    def set_multiple(
        self, key: str, values: Sequence[Any], scope: Scope | None = None
    ) -> None:
        super().set_multiple(key, values, scope=scope)
        self._secondary.set_multiple(key, values, scope=scope)

    def get_multiple(self, key: str, scope: Scope | None = None) -> list[Any]:
        try:
            return super().get_multiple(key, scope=scope)
        except KeyNotFoundError:
            logger.info("Primary tier miss, reading secondary", extra={"key": key})
        values = self._secondary.get_multiple(key, scope=scope)
        super().set_multiple(key, values, scope=scope)
        return values
