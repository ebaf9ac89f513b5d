import logging

from pymemcache.client.base import Client

logger = logging.getLogger(__name__)


def get_memcache_client(host, port):
    """
    Initialize and return a Memcached client.

    Returns:
        pymemcache.client.base.Client: Configured Memcached client
    """
    try:
        return Client(f"{host}:{port}")
    except Exception as e:
        logger.exception(
            "Memcache Client Initialization Failed",
            extra={"host": host, "port": port},
        )
        raise e
