from dataclasses import dataclass
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.config.models import GeminiModels


@dataclass
class GeminiConfig(BaseLlmConfig):
    """Google Gemini configuration"""
    model: str = GeminiModels.FLASH
    api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
