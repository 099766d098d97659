from dataclasses import dataclass
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.config.models import AnthropicModels


@dataclass
class AnthropicConfig(BaseLlmConfig):
    """Anthropic-specific configuration"""
    model: str = AnthropicModels.HAIKU
    api_base_url: str = "https://api.anthropic.com/v1"
