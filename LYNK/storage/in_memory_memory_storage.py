from typing import Dict, Optional, Tuple
from LYNK.types import MemoryEntry, MemoryType
from LYNK.types.memory_types import utc_now
from LYNK.storage.abstract_storage.memory_storage import MemoryStorage


class InMemoryMemoryStorage(MemoryStorage):
    """
    In-memory implementation of MemoryStorage for development and testing.
    Entries live for the lifetime of the process. Reads hand out copies so
    callers can never mutate stored records behind the storage's back.
    """

    def __init__(self):
        super().__init__()
        self.entries: Dict[Tuple[MemoryType, str], MemoryEntry] = {}
        self._next_id = 1

    async def find_by_value(
        self, memory_type: MemoryType, value: str
    ) -> Optional[MemoryEntry]:
        entry = self.entries.get((memory_type, value))
        return entry.model_copy(deep=True) if entry else None

    async def find_by_alias(
        self, memory_type: MemoryType, alias: str
    ) -> Optional[MemoryEntry]:
        for (entry_type, _), entry in self.entries.items():
            if entry_type == memory_type and alias in entry.aliases:
                return entry.model_copy(deep=True)
        return None

    async def count_by_type(self, memory_type: MemoryType) -> int:
        return sum(1 for entry_type, _ in self.entries if entry_type == memory_type)

    async def upsert(self, entry: MemoryEntry) -> MemoryEntry:
        # no await between lookup and write, so this is atomic on the event loop
        slot = (entry.type, entry.value)
        stored = self.entries.get(slot)
        if stored is None:
            stored = entry.model_copy(deep=True)
            stored.id = str(self._next_id)
            stored.usage_count = max(stored.usage_count, 1)
            self._next_id += 1
            self.entries[slot] = stored
        else:
            stored.usage_count += 1
            stored.last_used_at = utc_now()
            for alias in entry.aliases:
                stored.add_alias(alias)
        return stored.model_copy(deep=True)
