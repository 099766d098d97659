from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple
from LYNK.types import MemoryEntry, MemoryType


class MemoryStorage(ABC):
    """
    Abstract base for canonical memory persistence.

    Implementations must keep (type, value) unique and must make upsert atomic:
    two concurrent upserts of a never-seen (type, value) leave exactly one
    record whose usage_count counts both.
    """

    @abstractmethod
    async def find_by_value(
        self, memory_type: MemoryType, value: str
    ) -> Optional[MemoryEntry]:
        pass

    @abstractmethod
    async def find_by_alias(
        self, memory_type: MemoryType, alias: str
    ) -> Optional[MemoryEntry]:
        pass

    @abstractmethod
    async def count_by_type(self, memory_type: MemoryType) -> int:
        pass

    @abstractmethod
    async def upsert(self, entry: MemoryEntry) -> MemoryEntry:
        """
        Fold one use of entry into storage.

        No record for (entry.type, entry.value): insert entry as given.
        Otherwise: increment usage_count, refresh last_used_at and add
        entry.aliases to the stored record. Returns the stored record.
        """
        pass

    async def initialize(self) -> bool:
        return True

    async def check_health(self) -> Tuple[bool, Dict[str, Any]]:
        return True, {"status": "healthy"}

    def close(self) -> None:
        pass
