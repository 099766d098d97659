from .exceptions import (
    LLMError,
    LLMProviderError,
    LLMConfigError,
    LLMRateLimitError,
    LLMAuthenticationError,
    LLMResponseError,
)

__all__ = [
    "LLMError",
    "LLMProviderError",
    "LLMConfigError",
    "LLMRateLimitError",
    "LLMAuthenticationError",
    "LLMResponseError",
]
