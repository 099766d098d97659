from .groq import GroqConfig
from .gemini import GeminiConfig
from .huggingface import HuggingFaceConfig
from .anthropic import AnthropicConfig

__all__ = ["GroqConfig", "GeminiConfig", "HuggingFaceConfig", "AnthropicConfig"]
