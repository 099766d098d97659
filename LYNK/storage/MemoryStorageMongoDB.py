from typing import Any, Dict, Optional, Tuple
import time
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from LYNK.types import MemoryEntry, MemoryType
from LYNK.types.memory_types import utc_now
from LYNK.storage.abstract_storage.memory_storage import MemoryStorage
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


class MongoDBMemoryStorage(MemoryStorage):
    """
    MongoDB implementation of MemoryStorage.

    Uniqueness of (type, value) is enforced by a unique index, and upsert is a
    single find_one_and_update so concurrent creators fold into one record.
    """

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        db_name: str = "keeplynk_ai",
        collection_name: str = "agent_memory",
        collection: Optional[AsyncIOMotorCollection] = None,
    ):
        if collection is not None:
            self.client = None
            self.collection = collection
        else:
            self.client = AsyncIOMotorClient(mongo_uri, tz_aware=True)
            self.collection = self.client[db_name][collection_name]
        self._indices_ready = False

    async def _setup_indices(self) -> None:
        """Setup the unique canonical index and the alias lookup index"""
        await self.collection.create_index(
            [("type", ASCENDING), ("value", ASCENDING)],
            unique=True,
            name="type_value_unique",
        )
        await self.collection.create_index(
            [("type", ASCENDING), ("aliases", ASCENDING)], name="type_aliases"
        )
        self._indices_ready = True

    async def initialize(self) -> bool:
        """Verify the connection and create indices."""
        try:
            if self.client is not None:
                await self.client.admin.command("ping")
            await self._setup_indices()
            return True
        except PyMongoError as e:
            logger.error(f"Failed to initialize MongoDB: {str(e)}")
            return False

    async def _find_one(self, query: Dict[str, Any]) -> Optional[MemoryEntry]:
        document = await self.collection.find_one(query)
        return MemoryEntry.from_document(document) if document else None

    async def find_by_value(
        self, memory_type: MemoryType, value: str
    ) -> Optional[MemoryEntry]:
        return await self._find_one({"type": memory_type.value, "value": value})

    async def find_by_alias(
        self, memory_type: MemoryType, alias: str
    ) -> Optional[MemoryEntry]:
        # equality on an array field matches any element
        return await self._find_one({"type": memory_type.value, "aliases": alias})

    async def count_by_type(self, memory_type: MemoryType) -> int:
        return await self.collection.count_documents({"type": memory_type.value})

    async def upsert(self, entry: MemoryEntry) -> MemoryEntry:
        if not self._indices_ready:
            await self._setup_indices()

        query = {"type": entry.type.value, "value": entry.value}
        update = {
            "$setOnInsert": {"created_at": entry.created_at},
            "$set": {"last_used_at": utc_now()},
            "$inc": {"usage_count": 1},
            "$addToSet": {"aliases": {"$each": list(entry.aliases)}},
        }
        try:
            document = await self._upsert_document(query, update)
        except DuplicateKeyError:
            # lost an insert race; the winner's record exists now
            logger.debug(f"Upsert race on {query}, retrying as update")
            document = await self._upsert_document(query, update)
        return MemoryEntry.from_document(document)

    async def _upsert_document(
        self, query: Dict[str, Any], update: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.collection.find_one_and_update(
            query,
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    async def check_health(self) -> Tuple[bool, Dict[str, Any]]:
        """Check MongoDB health status."""
        if self.client is None:
            return True, {"status": "healthy"}
        try:
            start_time = time.time()
            await self.client.admin.command("ping")
            latency = time.time() - start_time

            return True, {
                "status": "healthy",
                "latency": f"{latency:.3f}s"
            }
        except PyMongoError as e:
            return False, {
                "status": "unhealthy",
                "error": str(e)
            }

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
