"""Shared fixtures: dict-backed backend clients and NSQ message doubles."""

from unittest.mock import MagicMock

import gnsq
import pytest
import redis
from pymemcache.exceptions import MemcacheUnexpectedCloseError

from infra_common.config import NSQConfig


class FakeRedisClient:
    """Stores raw values the way redis-py returns them (bytes)."""

    def __init__(self, fail: bool = False):
        self.data: dict[str, bytes] = {}
        self.fail = fail
        self.set_calls: list[tuple] = []

    def set(self, key, value, *args, **kwargs):
        if self.fail:
            raise redis.ConnectionError("Connection refused")
        self.set_calls.append((key, value, args, kwargs))
        self.data[key] = value if isinstance(value, bytes) else str(value).encode()
        return True

    def get(self, key):
        if self.fail:
            raise redis.ConnectionError("Connection refused")
        return self.data.get(key)


class FakeMemcacheClient:
    def __init__(self, fail: bool = False, stored: bool = True):
        self.data: dict[str, bytes] = {}
        self.fail = fail
        self.stored = stored
        self.set_calls: list[tuple] = []

    def set(self, key, value, expire=0, noreply=None, flags=None):
        if self.fail:
            raise MemcacheUnexpectedCloseError()
        self.set_calls.append((key, value, expire, noreply))
        if self.stored:
            self.data[key] = value
        return self.stored

    def get(self, key, default=None):
        if self.fail:
            raise MemcacheUnexpectedCloseError()
        return self.data.get(key, default)


@pytest.fixture
def redis_client():
    return FakeRedisClient()


@pytest.fixture
def failing_redis_client():
    return FakeRedisClient(fail=True)


@pytest.fixture
def memcache_client():
    return FakeMemcacheClient()


@pytest.fixture
def failing_memcache_client():
    return FakeMemcacheClient(fail=True)


@pytest.fixture
def unstored_memcache_client():
    return FakeMemcacheClient(stored=False)


@pytest.fixture
def make_message():
    """Builds gnsq message doubles: make_message(body, attempts=1)."""

    def factory(body: bytes, attempts: int = 1) -> MagicMock:
        message = MagicMock(spec=gnsq.Message)
        message.body = body
        message.attempts = attempts
        return message

    return factory


@pytest.fixture
def nsq_config():
    return NSQConfig(host="nsq", tcp_port="4150", http_port="4161")
