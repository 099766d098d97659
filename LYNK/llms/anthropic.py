from typing import Optional
import anthropic
from anthropic import AsyncAnthropic
from LYNK.llms.base import AsyncLLMBase
from LYNK.config.llms.anthropic import AnthropicConfig
from LYNK.llms.utils.exceptions import (
    LLMConfigError,
    LLMProviderError,
    LLMRateLimitError,
    LLMAuthenticationError,
)
from LYNK.llms.utils.utils import chat_messages, require_text
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)


class AnthropicLLM(AsyncLLMBase):
    """Anthropic Claude implementation"""

    provider_name = "anthropic"

    def __init__(self, config: Optional[AnthropicConfig] = None):
        super().__init__(config or AnthropicConfig())
        if not self.config.api_key:
            raise LLMConfigError(
                "API key required for Anthropic provider", provider="anthropic"
            )
        self.client = AsyncAnthropic(
            api_key=self.config.api_key, timeout=self.config.timeout
        )

    async def _generate(self, prompt: str) -> str:
        """Implement Anthropic-specific generation with error handling"""
        try:
            logger.debug("Generating response with anthropic")
            response = await self.client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                messages=chat_messages(prompt),
                temperature=self.config.temperature,
            )
        except anthropic.RateLimitError as e:
            raise LLMRateLimitError(str(e), provider="anthropic")
        except anthropic.AuthenticationError as e:
            raise LLMAuthenticationError(str(e), provider="anthropic")
        except anthropic.APIError as e:
            raise LLMProviderError(str(e), provider="anthropic")

        text = "".join(
            getattr(block, "text", "") for block in (response.content or [])
        )
        return require_text(text, "anthropic")
