"""Base Skill implementation."""
from abc import ABC, abstractmethod
from typing import List, Optional
from LYNK.llms.base import AsyncLLMBase
from LYNK.memory.memory_store import MemoryStore
from LYNK.types import AgentContext


class Skill(ABC):
    """
    One enrichment capability. A skill reads the shared context, asks the
    generation client for exactly one completion, and writes a single field
    back under memory_key. It never keeps a reference to the context.
    """

    # position in the agent's fixed execution order
    order: int = 100
    capability: str = ""
    memory_key: str = ""

    def __init__(
        self,
        llm: AsyncLLMBase,
        memory_store: Optional[MemoryStore] = None,
    ):
        self.llm = llm
        self.memory_store = memory_store

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def uses_memory(self) -> bool:
        """Whether a MemoryStore was configured for canonical reuse"""
        return self.memory_store is not None

    def capability_name(self) -> str:
        """Key this skill answers to in AgentContext.needs"""
        return self.capability

    @abstractmethod
    def build_prompt(self, context: AgentContext) -> str:
        pass

    @abstractmethod
    async def apply(self, context: AgentContext) -> None:
        pass

    @staticmethod
    def format_prompt(
        instruction: str,
        context: AgentContext,
        rules: List[str],
        hints: Optional[List[str]] = None,
    ) -> str:
        lines = [
            instruction,
            "",
            f"URL: {context.url}",
            f"Persona: {context.persona}",
        ]
        lines.extend(hints or [])
        lines.append("")
        lines.append("Rules:")
        lines.extend(f"- {rule}" for rule in rules)
        return "\n".join(lines) + "\n"
