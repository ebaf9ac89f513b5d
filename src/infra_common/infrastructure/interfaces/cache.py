"""Abstract interface for cache operations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from infra_common.scope import Scope


class Cache(ABC):
    """Abstract base class for cache backends."""

    @abstractmethod
    def set_single(self, key: str, value: Any, scope: Scope | None = None) -> None:
        """
        Stores a single record under a key with no expiration.

        Args:
            key: The cache key.
            value: A JSON-serializable value.
            scope: Optional caller scope; the call fails if it is already done.

        Raises:
            SerializationError: If the value cannot be encoded.
            CacheServiceError: If the backend write fails.
            ScopeExpiredError: If the scope was cancelled or expired.
        """

    @abstractmethod
    def get_single(self, key: str, scope: Scope | None = None) -> Any:
        """
        Retrieves a single record.

        Args:
            key: The cache key.
            scope: Optional caller scope; the call fails if it is already done.

        Returns:
            The decoded value.

        Raises:
            KeyNotFoundError: If the key is absent.
            DeserializationError: If the stored bytes are not valid JSON.
            CacheServiceError: If the backend read fails.
            ScopeExpiredError: If the scope was cancelled or expired.
        """

    @abstractmethod
    def set_multiple(
        self, key: str, values: Sequence[Any], scope: Scope | None = None
    ) -> None:
        """
        Stores an ordered sequence of records as one unit under a key.

        Raises:
            SerializationError: If the values are not a sequence or cannot be encoded.
            CacheServiceError: If the backend write fails.
            ScopeExpiredError: If the scope was cancelled or expired.
        """

    @abstractmethod
    def get_multiple(self, key: str, scope: Scope | None = None) -> list[Any]:
        """
        Retrieves a sequence stored with `set_multiple`.

        Raises:
            KeyNotFoundError: If the key is absent.
            DeserializationError: If the stored value is not a JSON array.
            CacheServiceError: If the backend read fails.
            ScopeExpiredError: If the scope was cancelled or expired.
        """
