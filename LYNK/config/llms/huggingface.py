from dataclasses import dataclass
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.config.models import HuggingFaceModels


@dataclass
class HuggingFaceConfig(BaseLlmConfig):
    """HuggingFace inference API configuration"""
    model: str = HuggingFaceModels.MISTRAL_7B
    api_base_url: str = "https://api-inference.huggingface.co/models"
    return_full_text: bool = False
