import logging

import gnsq

from infra_common.exceptions import BrokerConnectionError

logger = logging.getLogger(__name__)


def get_nsq_producer(address):
    """
    Creates an NSQ producer for the nsqd at `address` and starts it.

    gnsq logs and swallows connection failures during `start()`, so the
    connection is checked afterwards. The producer's greenlets run on the
    gevent hub of the calling thread; publish from that same thread.

    Args:
        address (str): nsqd TCP address as "host:port".

    Returns:
        gnsq.Producer: A started, connected producer.

    Raises:
        BrokerConnectionError: If no connection to nsqd could be made.
    """
    producer = gnsq.Producer(nsqd_tcp_addresses=[address])
    try:
        producer.start()
    except Exception as e:
        logger.exception("Failed to start NSQ producer", extra={"address": address})
        raise BrokerConnectionError(address, cause=e) from e
    if not producer.is_connected:
        logger.error("NSQ producer not connected", extra={"address": address})
        producer.close()
        raise BrokerConnectionError(address)
    return producer


def get_lookupd_client(address):
    """Returns an HTTP client for the nsqlookupd at `address` ("host:port")."""
    return gnsq.LookupdClient.from_url(f"http://{address}")


def get_nsq_consumer(topic, channel, lookupd_address, max_in_flight=1):
    """
    Creates an NSQ consumer for `topic` in the `channel` group.

    The consumer discovers nsqd nodes through nsqlookupd and is not started.

    Returns:
        gnsq.Consumer: The unstarted consumer.
    """
    return gnsq.Consumer(
        topic,
        channel,
        lookupd_http_addresses=[lookupd_address],
        max_in_flight=max_in_flight,
    )
