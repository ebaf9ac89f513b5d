import logging

import redis

logger = logging.getLogger(__name__)


def get_redis_client(host, port):
    """
    Initialize and return a Redis client for database 0 without a password.

    The client connects lazily on the first command.

    Returns:
        redis.Redis: Configured Redis client
    """
    try:
        return redis.Redis(host=host, port=int(port), password=None, db=0)
    except Exception as e:
        logger.exception(
            "Redis Client Initialization Failed",
            extra={"host": host, "port": port},
        )
        raise e
