from .abstract_storage.memory_storage import MemoryStorage
from .in_memory_memory_storage import InMemoryMemoryStorage

__all__ = [
    "MemoryStorage",
    "InMemoryMemoryStorage",
]
