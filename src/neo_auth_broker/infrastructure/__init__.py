"""Broker infrastructure: external storage adapters."""

from .repositories import MemoryStorageService, RedisStorageService

__all__ = [
    "MemoryStorageService",
    "RedisStorageService",
]
