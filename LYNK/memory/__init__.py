from .normalizer import normalize
from .memory_store import MemoryStore
from .exceptions import MemoryStoreError, InvalidMemoryValueError

__all__ = [
    "normalize",
    "MemoryStore",
    "MemoryStoreError",
    "InvalidMemoryValueError",
]
