"""Base Agent implementation."""
from abc import ABC, abstractmethod

from LYNK.types import AgentContext


class Agent(ABC):
    """Base abstract Agent class."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def execute(self, context: AgentContext) -> None:
        """Enrich the context in place."""
        pass
