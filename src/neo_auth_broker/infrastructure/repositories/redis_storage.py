"""Redis key-value storage for allow lists."""

import logging
from typing import Optional, Union

from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class RedisStorageService:
    """Redis-backed StorageService following maximum separation principle.

    Handles ONLY string get/set under a key prefix. Parsing of stored values
    stays with the callers.
    """

    def __init__(self, redis_client: Redis, key_prefix: str = "neo_auth_broker"):
        """Initialize Redis storage.

        Args:
            redis_client: redis.asyncio client instance
            key_prefix: Prefix for storage keys
        """
        if redis_client is None:
            raise ValueError("Redis client is required")

        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    async def get_data(self, key: str) -> Optional[str]:
        value: Optional[Union[str, bytes]] = await self.redis.get(self._make_key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set_data(self, key: str, value: str) -> None:
        await self.redis.set(self._make_key(key), value)
        logger.debug(f"Stored value under '{self._make_key(key)}'")

