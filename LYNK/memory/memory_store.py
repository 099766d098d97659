import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional, Tuple
from LYNK.memory.exceptions import InvalidMemoryValueError
from LYNK.memory.normalizer import normalize
from LYNK.storage.abstract_storage.memory_storage import MemoryStorage
from LYNK.storage.in_memory_memory_storage import InMemoryMemoryStorage
from LYNK.types import MemoryEntry, MemoryType
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


class MemoryStore:
    """
    Canonical tag/category memory.

    Raw values produced by generation are resolved to a canonical value that
    was seen before whenever possible, so "UI/UX", "ui ux" and "UI-UX" end up
    as one entry instead of three near duplicates. Every resolution counts as
    one use of the canonical entry.
    """

    def __init__(self, storage: Optional[MemoryStorage] = None):
        self.storage = storage or InMemoryMemoryStorage()
        # per-slot lock and the number of resolutions holding or awaiting it
        self._locks: Dict[Tuple[MemoryType, str], asyncio.Lock] = {}
        self._lock_users: Dict[Tuple[MemoryType, str], int] = {}

    @asynccontextmanager
    async def _slot_lock(
        self, memory_type: MemoryType, value: str
    ) -> AsyncIterator[None]:
        """Serialize resolutions of one (type, value); the lock is dropped once idle."""
        slot = (memory_type, value)
        lock = self._locks.get(slot)
        if lock is None:
            lock = self._locks[slot] = asyncio.Lock()
        self._lock_users[slot] = self._lock_users.get(slot, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[slot] -= 1
            if self._lock_users[slot] == 0:
                del self._lock_users[slot]
                del self._locks[slot]

    async def reuse_or_create(self, raw_tag: str) -> str:
        """Resolve a raw tag to its canonical value, creating it on first sight."""
        return await self._resolve(MemoryType.TAG, raw_tag)

    async def reuse_or_create_category(self, raw_category: str) -> str:
        """Resolve a raw category to its canonical value, creating it on first sight."""
        return await self._resolve(MemoryType.CATEGORY, raw_category)

    async def count(self, memory_type: MemoryType) -> int:
        return await self.storage.count_by_type(memory_type)

    async def get(self, memory_type: MemoryType, value: str) -> Optional[MemoryEntry]:
        return await self.storage.find_by_value(memory_type, normalize(value))

    async def _lookup(
        self, memory_type: MemoryType, raw: str, normalized: str
    ) -> Optional[MemoryEntry]:
        return (
            await self.storage.find_by_value(memory_type, normalized)
            or await self.storage.find_by_alias(memory_type, raw)
        )

    async def _resolve(self, memory_type: MemoryType, raw: str) -> str:
        normalized = normalize(raw)
        if not normalized:
            raise InvalidMemoryValueError(raw)

        # one resolution per canonical slot at a time within this process;
        # the storage's atomic upsert covers other processes
        async with self._slot_lock(memory_type, normalized):
            existing = await self._lookup(memory_type, raw, normalized)
            if existing is not None:
                candidate = MemoryEntry(
                    type=memory_type,
                    value=existing.value,
                    aliases=[raw],
                )
            else:
                candidate = MemoryEntry(
                    type=memory_type,
                    value=normalized,
                    aliases=[raw],
                    usage_count=1,
                )
            stored = await self.storage.upsert(candidate)

        if existing is not None:
            logger.debug(
                f"Reused {memory_type.value} {stored.value!r} for {raw!r} "
                f"(uses: {stored.usage_count})"
            )
        else:
            logger.debug(f"Created {memory_type.value} {stored.value!r} from {raw!r}")
        return stored.value
