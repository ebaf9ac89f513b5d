"""Abstract interfaces for message broker operations."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from infra_common.models import NsqEvent
from infra_common.scope import Scope

# Called as handler(scope, topic, body). Raising marks the message as failed.
ConsumerFunc = Callable[[Scope, str, str], None]


class MessagePublisher(ABC):
    """Abstract base class for publishing messages to a broker."""

    @abstractmethod
    def publish(self, event: NsqEvent, scope: Scope | None = None) -> None:
        """
        Publishes the event payload to its topic.

        Args:
            event: Topic and raw payload bytes.
            scope: Optional caller scope; the call fails if it is already done.

        Raises:
            PublishError: If publishing fails.
        """


class MessageBroker(MessagePublisher, ABC):
    """Abstract base class for full message broker operations (publish + consume)."""

    @abstractmethod
    def consume(self, scope: Scope, topic: str) -> str:
        """
        Returns the message body delivered into a handler scope.

        Args:
            scope: The scope passed to a consumer handler.
            topic: The topic the handler was registered on.

        Raises:
            ConsumeMissingError: If the scope holds no message for the topic.
        """

    @abstractmethod
    def register_consumer(self, topic: str, handler: ConsumerFunc):
        """
        Subscribes `handler` to a topic and starts delivering messages to it.

        Args:
            topic: The topic to subscribe to.
            handler: Function called for each message with (scope, topic, body).

        Returns:
            The registered consumer.

        Raises:
            BrokerConnectionError: If the lookup service is unreachable.
        """

    @abstractmethod
    def close(self) -> None:
        """Stops all registered consumers and the producer."""
