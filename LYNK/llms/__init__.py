from typing import List, Optional
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.llms.base import AsyncLLMBase
from LYNK.llms.fallback import FallbackLLMClient, GENERATION_FAILED, is_generation_failure
from LYNK.llms.offline import OfflineLLM
from LYNK.llms.utils.exceptions import LLMConfigError
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)

PROVIDER_TYPES = ("groq", "gemini", "huggingface", "anthropic")


def create_llm_provider(
    provider_type: str, config: Optional[BaseLlmConfig] = None
) -> AsyncLLMBase:
    """Factory function to create LLM providers with lazy imports"""
    if provider_type == "groq":
        from LYNK.llms.groq import GroqLLM

        return GroqLLM(config)

    elif provider_type == "gemini":
        from LYNK.llms.gemini import GeminiLLM

        return GeminiLLM(config)

    elif provider_type == "huggingface":
        from LYNK.llms.huggingface import HuggingFaceLLM

        return HuggingFaceLLM(config)

    elif provider_type == "anthropic":
        try:
            from LYNK.llms.anthropic import AnthropicLLM

            return AnthropicLLM(config)
        except ImportError:
            raise ImportError(
                "Anthropic client is not installed. Install it with 'pip install anthropic'"
            )

    elif provider_type == "offline":
        return OfflineLLM()

    raise ValueError(f"Unknown provider type: {provider_type}")


def _config_for(provider_type: str, api_key: Optional[str], timeout: float) -> BaseLlmConfig:
    from LYNK.config.llms import (
        AnthropicConfig,
        GeminiConfig,
        GroqConfig,
        HuggingFaceConfig,
    )

    config_cls = {
        "groq": GroqConfig,
        "gemini": GeminiConfig,
        "huggingface": HuggingFaceConfig,
        "anthropic": AnthropicConfig,
    }[provider_type]
    return config_cls(api_key=api_key, timeout=timeout)


def create_generation_client(settings) -> AsyncLLMBase:
    """
    Build the generation client described by settings: the offline provider
    when LLM_OFFLINE is set, otherwise a fallback chain over every configured
    provider that has an API key, in LLM_PROVIDERS order.
    """
    if settings.LLM_OFFLINE:
        logger.info("LLM_OFFLINE set, using offline generation")
        return OfflineLLM()

    providers: List[AsyncLLMBase] = []
    for name in settings.provider_order:
        if name not in PROVIDER_TYPES:
            raise ValueError(f"Unknown provider type: {name}")
        api_key = settings.api_key_for(name)
        if not api_key:
            logger.warning(f"No API key for {name}, leaving it out of the chain")
            continue
        try:
            providers.append(
                create_llm_provider(name, _config_for(name, api_key, settings.LLM_TIMEOUT))
            )
        except (LLMConfigError, ImportError) as e:
            logger.warning(f"Skipping provider {name}: {e}")

    logger.info(f"Generation chain: {[p.name for p in providers] or 'empty'}")
    return FallbackLLMClient(providers)


__all__ = [
    "create_llm_provider",
    "create_generation_client",
    "AsyncLLMBase",
    "FallbackLLMClient",
    "OfflineLLM",
    "GENERATION_FAILED",
    "is_generation_failure",
]
