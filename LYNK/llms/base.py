from abc import ABC, abstractmethod
from typing import Optional
from LYNK.config.base_llm import BaseLlmConfig


class AsyncLLMBase(ABC):
    """Base class for all LLM implementations: a prompt goes in, text comes out"""

    provider_name: str = "base"

    def __init__(self, config: Optional[BaseLlmConfig] = None):
        self.config = config or BaseLlmConfig()

    @property
    def name(self) -> str:
        return self.provider_name

    async def generate(self, prompt: str) -> str:
        """Template method pattern for response generation"""
        return await self._generate(prompt)

    @abstractmethod
    async def _generate(self, prompt: str) -> str:
        """Actual implementation by specific providers"""
        pass
