"""Custom exceptions for cache and message broker operations."""


class SerializationError(Exception):
    """Raised when a value cannot be encoded for storage."""

    def __init__(self, key: str, cause: Exception | None = None):
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to serialize value for key '{key}'")


class DeserializationError(Exception):
    """Raised when stored bytes do not match the expected record shape."""

    def __init__(self, key: str, cause: Exception | None = None):
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to deserialize value for key '{key}'")


class KeyNotFoundError(Exception):
    """Raised when a key is absent from the cache."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' not found in cache")


class CacheServiceError(Exception):
    """Raised when cache operations fail."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Cache {operation} failed for key '{key}'")


class PublishError(Exception):
    """Raised when publishing an event to the message broker fails."""

    def __init__(self, topic: str, cause: Exception | None = None):
        self.topic = topic
        self.cause = cause
        super().__init__(f"Failed to publish event to topic '{topic}'")


class BrokerConnectionError(Exception):
    """Raised when the producer or the lookup service cannot be reached."""

    def __init__(self, address: str, cause: Exception | None = None):
        self.address = address
        self.cause = cause
        super().__init__(f"Failed to connect to '{address}'")


class ConsumeMissingError(Exception):
    """Raised when a scope holds no delivered message for the topic."""

    def __init__(self, topic: str):
        self.topic = topic
        super().__init__(f"failed to consume the topic {topic}")


class ScopeExpiredError(Exception):
    """Raised when an operation is attempted on a cancelled or expired scope."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Scope is no longer active: {reason}")
