"""In-memory key-value storage."""

from typing import Dict, Optional


class MemoryStorageService:
    """Dict-backed StorageService for tests and single-process hosts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get_data(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set_data(self, key: str, value: str) -> None:
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)
