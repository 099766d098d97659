from typing import Optional, Tuple
from LYNK.agents.resource_agent import ResourceAgent
from LYNK.config.settings import Settings
from LYNK.decision.decision_engine import DecisionEngine
from LYNK.llms import create_generation_client
from LYNK.llms.base import AsyncLLMBase
from LYNK.memory.memory_store import MemoryStore
from LYNK.orchestrator import EnrichmentOrchestrator
from LYNK.skills import CategorySkill, DescriptionSkill, TagSkill, TitleSkill
from LYNK.storage import InMemoryMemoryStorage, MemoryStorage
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


def create_memory_storage(settings: Settings) -> Optional[MemoryStorage]:
    backend = settings.MEMORY_BACKEND.lower()
    if backend == "none":
        return None
    if backend == "memory":
        return InMemoryMemoryStorage()
    if backend == "mongodb":
        from LYNK.storage.MemoryStorageMongoDB import MongoDBMemoryStorage

        config = settings.mongodb()
        logger.info(f"Using MongoDB memory storage ({config.database}.{config.memory_collection})")
        return MongoDBMemoryStorage(
            mongo_uri=config.uri,
            db_name=config.database,
            collection_name=config.memory_collection,
        )
    raise ValueError(f"Unknown memory backend: {settings.MEMORY_BACKEND}")


def build_agent(
    llm: AsyncLLMBase, memory_store: Optional[MemoryStore] = None
) -> ResourceAgent:
    return ResourceAgent(
        skills=[
            TitleSkill(llm),
            DescriptionSkill(llm),
            TagSkill(llm, memory_store),
            CategorySkill(llm, memory_store),
        ]
    )


def build_orchestrator(
    settings: Optional[Settings] = None,
) -> Tuple[EnrichmentOrchestrator, Optional[MemoryStorage]]:
    """Wire generation client, memory, skills, agent and decision engine."""
    settings = settings or Settings()
    Logger.configure(settings.LOG_LEVEL)

    llm = create_generation_client(settings)
    storage = create_memory_storage(settings)
    memory_store = MemoryStore(storage) if storage is not None else None
    if memory_store is None:
        logger.warning("No memory backend configured, tags and categories stay raw")

    orchestrator = EnrichmentOrchestrator(
        agent=build_agent(llm, memory_store),
        decision_engine=DecisionEngine(),
    )
    return orchestrator, storage
