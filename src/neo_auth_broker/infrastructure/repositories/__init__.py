"""Storage implementations."""

from .memory_storage import MemoryStorageService
from .redis_storage import RedisStorageService

__all__ = [
    "MemoryStorageService",
    "RedisStorageService",
]
