"""Key-value storage protocol contract."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class StorageService(Protocol):
    """Protocol for the string key-value store backing allow lists.

    Implementations handle specific storage (memory, Redis, etc.).
    """

    async def get_data(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    async def set_data(self, key: str, value: str) -> None:
        """Store a value under key, replacing any previous value."""
        ...
