"""NSQ message broker implementation."""

import logging
import threading
from enum import Enum

import gevent
import gnsq

from infra_common.config import NSQConfig
from infra_common.exceptions import (
    BrokerConnectionError,
    ConsumeMissingError,
    PublishError,
)
from infra_common.infrastructure.interfaces import ConsumerFunc, MessageBroker
from infra_common.models import DeliveredMessage, NsqEvent
from infra_common.nsq import get_nsq_consumer
from infra_common.scope import Scope, check_scope

logger = logging.getLogger(__name__)

STOP_POLL_INTERVAL = 0.1  # seconds
STOP_JOIN_TIMEOUT = 5.0  # seconds


class ConsumerState(str, Enum):
    """Lifecycle of a registered consumer."""

    CREATED = "created"
    CONNECTED = "connected"
    RUNNING = "running"
    TERMINATED = "terminated"


class RegisteredConsumer:
    """
    A topic/handler binding and the subscription that feeds it.

    The gnsq consumer runs on its own daemon thread, which owns a separate
    gevent hub. The caller's thread never has to yield to gevent for
    messages to be delivered. Stopping is signalled through a threading
    Event; the consumer is closed from inside its own thread.
    """

    def __init__(self, topic: str, channel: str, handler: ConsumerFunc, consumer):
        self.topic = topic
        self.channel = channel
        self.handler = handler
        self.consumer = consumer
        self.state = ConsumerState.CREATED
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"nsq-consumer-{topic}", daemon=True
        )

    def __repr__(self) -> str:
        return (
            f"RegisteredConsumer(topic={self.topic!r}, channel={self.channel!r}, "
            f"state={self.state.value})"
        )

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()
        self.state = ConsumerState.RUNNING

    def stop(self, timeout: float = STOP_JOIN_TIMEOUT) -> None:
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("NSQ consumer thread did not stop", extra={"topic": self.topic})
        self.state = ConsumerState.TERMINATED

    def _run(self) -> None:
        try:
            self.consumer.start(block=False)
            while not self._stop.is_set():
                gevent.sleep(STOP_POLL_INTERVAL)
        except Exception:
            logger.exception("NSQ consumer loop failed", extra={"topic": self.topic})
        finally:
            try:
                self.consumer.close()
                self.consumer.join(timeout=STOP_JOIN_TIMEOUT)
            except Exception:
                logger.exception("Failed to close NSQ consumer", extra={"topic": self.topic})


class NSQBroker(MessageBroker):
    """Message broker implementation using NSQ with nsqlookupd discovery."""

    def __init__(
        self,
        producer: gnsq.Producer,
        lookupd: gnsq.LookupdClient,
        config: NSQConfig,
    ):
        self._producer = producer
        self._lookupd = lookupd
        self._config = config
        self._consumers: list[RegisteredConsumer] = []

    @property
    def consumers(self) -> list[RegisteredConsumer]:
        return list(self._consumers)

    def publish(self, event: NsqEvent, scope: Scope | None = None) -> None:
        """
        Publishes the event payload to its topic through nsqd.

        Call from the thread that created the broker; the producer's
        connection lives on that thread's gevent hub.

        Raises:
            PublishError: If publishing fails.
            ScopeExpiredError: If the scope was cancelled or expired.
        """
        check_scope(scope)
        try:
            self._producer.publish(event.topic, event.message)
            logger.info(
                "Event published",
                extra={"topic": event.topic, "size": len(event.message)},
            )
        except Exception as e:
            logger.exception("Failed to publish event", extra={"topic": event.topic})
            raise PublishError(event.topic, cause=e) from e

    def consume(self, scope: Scope, topic: str) -> str:
        message = scope.message
        if message is None or message.topic != topic:
            logger.warning("Nothing to consume", extra={"topic": topic})
            raise ConsumeMissingError(topic)
        return message.body

    def register_consumer(self, topic: str, handler: ConsumerFunc) -> RegisteredConsumer:
        """
        Subscribes `handler` to a topic in the configured channel.

        The consumer runs on a dedicated background thread. Each message
        gets a fresh Scope bounded by the processing timeout. A handler that
        raises causes the message to be requeued for immediate redelivery;
        otherwise the message is finished.

        Raises:
            BrokerConnectionError: If nsqlookupd is unreachable. The
                consumer is not started in that case.
        """
        lookupd_address = self._config.lookupd_address
        consumer = get_nsq_consumer(
            topic,
            self._config.channel,
            lookupd_address,
            max_in_flight=self._config.max_in_flight,
        )
        registered = RegisteredConsumer(topic, self._config.channel, handler, consumer)
        consumer.on_message.connect(self._message_handler(topic, handler), weak=False)

        try:
            self._lookupd.ping()
        except Exception as e:
            logger.exception(
                "Failed to connect to nsqlookupd",
                extra={"topic": topic, "address": lookupd_address},
            )
            raise BrokerConnectionError(lookupd_address, cause=e) from e
        registered.state = ConsumerState.CONNECTED

        registered.start()
        self._consumers.append(registered)
        logger.info(
            "Started consuming",
            extra={"topic": topic, "channel": self._config.channel},
        )
        return registered

    def close(self) -> None:
        """Stops every consumer thread, then the producer. Failures are logged."""
        for registered in self._consumers:
            try:
                registered.stop()
            except Exception:
                logger.exception(
                    "Failed to stop consumer", extra={"topic": registered.topic}
                )
        try:
            self._producer.close()
        except Exception:
            logger.exception("Failed to close NSQ producer")
        logger.info("NSQ broker closed", extra={"consumers": len(self._consumers)})

    def _message_handler(self, topic: str, handler: ConsumerFunc):
        timeout = self._config.processing_timeout

        def on_message(consumer, message):
            body = message.body.decode("utf-8", errors="replace")
            delivered = DeliveredMessage(
                topic=topic, body=body, attempts=message.attempts
            )
            scope = Scope(timeout=timeout, message=delivered)
            logger.info(
                "Message received",
                extra={"topic": topic, "attempt": message.attempts},
            )
            try:
                handler(scope, topic, body)
            except Exception:
                logger.exception(
                    "Message processing failed",
                    extra={"topic": topic, "attempt": message.attempts},
                )
                message.requeue(time_ms=0, backoff=False)
                return
            finally:
                scope.cancel()
            message.finish()

        return on_message
