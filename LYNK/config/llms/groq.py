from dataclasses import dataclass
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.config.models import GroqModels


@dataclass
class GroqConfig(BaseLlmConfig):
    """Groq-specific configuration (OpenAI-compatible chat completions)"""
    model: str = GroqModels.LLAMA_70B
    api_base_url: str = "https://api.groq.com/openai/v1"
