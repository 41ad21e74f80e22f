# services/store/token_store.py
import logging
import threading
import time
from abc import ABC, abstractmethod

import redis
from redis.exceptions import RedisError

from files_manager.common.errors import StorageFailure

logger = logging.getLogger(__name__)


class BaseTokenStore(ABC):
    @abstractmethod
    def set_with_expiry(self, key, value, ttl_seconds):
        pass

    @abstractmethod
    def get(self, key):
        """Stored value, or None when absent or expired."""
        pass

    @abstractmethod
    def delete(self, key):
        pass

    @abstractmethod
    def is_alive(self):
        pass


class RedisTokenStore(BaseTokenStore):
    """Token store on Redis; expiry is enforced by Redis itself."""

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_url(cls, url):
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def set_with_expiry(self, key, value, ttl_seconds):
        try:
            self.client.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            raise StorageFailure() from e

    def get(self, key):
        try:
            value = self.client.get(key)
        except RedisError as e:
            raise StorageFailure() from e
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        return value

    def delete(self, key):
        try:
            self.client.delete(key)
        except RedisError as e:
            raise StorageFailure() from e

    def is_alive(self):
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.error('Redis client not connected to the server: %s', e)
            return False


class MemoryTokenStore(BaseTokenStore):
    """进程内 Token 存储（重启失效），过期在读取时被动清理"""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._data = {}
        self._lock = threading.Lock()

    def set_with_expiry(self, key, value, ttl_seconds):
        with self._lock:
            self._data[key] = (value, self._clock() + ttl_seconds)

    def get(self, key):
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._data[key]
                return None
            return value

    def delete(self, key):
        with self._lock:
            self._data.pop(key, None)

    def is_alive(self):
        return True
