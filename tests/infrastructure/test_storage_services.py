"""Tests for storage implementations."""

import pytest
from unittest.mock import AsyncMock

from neo_auth_broker.infrastructure.repositories import MemoryStorageService, RedisStorageService


class TestMemoryStorageService:
    """Test cases for the in-memory store."""

    @pytest.mark.asyncio
    async def test_get_set(self, memory_storage):
        assert await memory_storage.get_data("k") is None

        await memory_storage.set_data("k", "v")
        assert await memory_storage.get_data("k") == "v"
        assert len(memory_storage) == 1

    @pytest.mark.asyncio
    async def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        storage = MemoryStorageService(initial)
        await storage.set_data("k", "changed")

        assert initial == {"k": "v"}


class TestRedisStorageService:
    """Test cases for the Redis store with a mocked client."""

    @pytest.fixture
    def redis_client(self):
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        client.set = AsyncMock(return_value=True)
        return client

    def test_requires_client(self):
        with pytest.raises(ValueError):
            RedisStorageService(None)

    @pytest.mark.asyncio
    async def test_keys_are_prefixed(self, redis_client):
        storage = RedisStorageService(redis_client, key_prefix="auth")

        await storage.set_data("github-alice", "[]")
        await storage.get_data("github-alice")

        redis_client.set.assert_awaited_once_with("auth:github-alice", "[]")
        redis_client.get.assert_awaited_once_with("auth:github-alice")

    @pytest.mark.asyncio
    async def test_empty_prefix_uses_raw_key(self, redis_client):
        storage = RedisStorageService(redis_client, key_prefix="")

        await storage.get_data("github-alice")

        redis_client.get.assert_awaited_once_with("github-alice")

    @pytest.mark.asyncio
    async def test_bytes_are_decoded(self, redis_client):
        redis_client.get.return_value = b'[{"id":"ext.foo","name":"Foo"}]'
        storage = RedisStorageService(redis_client)

        assert await storage.get_data("github-alice") == '[{"id":"ext.foo","name":"Foo"}]'

    @pytest.mark.asyncio
    async def test_missing_key(self, redis_client):
        storage = RedisStorageService(redis_client)

        assert await storage.get_data("github-alice") is None
