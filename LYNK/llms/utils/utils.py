from typing import Any, Dict, List, Optional
from .exceptions import (
    LLMAuthenticationError,
    LLMProviderError,
    LLMRateLimitError,
    LLMResponseError,
)


def error_for_status(status: int, body: str, provider: str) -> LLMProviderError:
    """Map a non-2xx HTTP status to the matching provider exception."""
    message = f"HTTP {status}: {body[:200]}"
    if status == 429:
        return LLMRateLimitError(message, provider=provider)
    if status in (401, 403):
        return LLMAuthenticationError(message, provider=provider)
    return LLMProviderError(message, provider=provider)


def dig(payload: Any, path: List[Any], provider: str) -> Any:
    """
    Walk nested dicts/lists along path, raising LLMResponseError on the first
    missing step. Used to pull generated text out of provider payloads.
    """
    current = payload
    for step in path:
        try:
            current = current[step]
        except (KeyError, IndexError, TypeError):
            raise LLMResponseError(
                f"Malformed response, missing {step!r} in {path}",
                provider=provider,
            )
    return current


def require_text(value: Optional[Any], provider: str) -> str:
    if value is None:
        raise LLMResponseError("Response contained no text", provider=provider)
    text = str(value)
    if not text.strip():
        raise LLMResponseError("Response text was empty", provider=provider)
    return text


def chat_messages(prompt: str) -> List[Dict[str, str]]:
    return [{"role": "user", "content": prompt}]
