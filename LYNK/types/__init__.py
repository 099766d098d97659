"""
Types module for LYNK.
Import all types from their respective modules and expose them at package level.
"""

# Base types
from .base_types import (
    AgentAction,
    AgentEvent,
    AgentInput,
    AgentDecision,
    AgentContext,
)

# Memory types
from .memory_types import (
    MemoryType,
    MemoryEntry,
)

__all__ = [
    # Base types
    "AgentAction",
    "AgentEvent",
    "AgentInput",
    "AgentDecision",
    "AgentContext",

    # Memory types
    "MemoryType",
    "MemoryEntry",
]
