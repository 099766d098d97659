# base_llm.py
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class BaseLlmConfig:
    """Base configuration for all LLM providers"""
    model: str = ""
    temperature: float = 0.7
    max_tokens: int = 500
    api_key: Optional[str] = field(default=None, repr=False)
    api_base_url: Optional[str] = None
    timeout: float = 30.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for API requests"""
        return {
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def __str__(self) -> str:
        """Safe string representation that hides API key"""
        return f"LLMConfig(model={self.model}, api_key=[REDACTED])"

    def __repr__(self) -> str:
        """Safe repr that hides API key"""
        return self.__str__()
