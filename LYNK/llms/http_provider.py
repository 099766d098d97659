"""Shared plumbing for providers reached over plain HTTP with aiohttp."""
import asyncio
from typing import Any, Dict, Optional
import aiohttp
from LYNK.config.base_llm import BaseLlmConfig
from LYNK.llms.base import AsyncLLMBase
from LYNK.llms.utils.exceptions import LLMConfigError, LLMProviderError
from LYNK.llms.utils.utils import error_for_status


class HttpLLM(AsyncLLMBase):
    """Provider that POSTs a JSON body and extracts text from a JSON reply"""

    def __init__(self, config: BaseLlmConfig):
        super().__init__(config)
        if not self.config.api_key:
            raise LLMConfigError(
                f"API key required for {self.provider_name} provider",
                provider=self.provider_name,
            )

    @property
    def endpoint(self) -> str:
        raise NotImplementedError

    @property
    def default_headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _create_request_data(self, prompt: str) -> Dict[str, Any]:
        raise NotImplementedError

    def _extract_text(self, payload: Any) -> str:
        raise NotImplementedError

    async def _make_request(self, data: Dict[str, Any]) -> Any:
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.endpoint, json=data, headers=self.default_headers
                ) as resp:
                    if resp.status < 200 or resp.status >= 300:
                        raise error_for_status(
                            resp.status, await resp.text(), self.provider_name
                        )
                    return await resp.json(content_type=None)
        except asyncio.TimeoutError:
            raise LLMProviderError(
                f"Request timed out after {self.config.timeout}s",
                provider=self.provider_name,
            )
        except aiohttp.ClientError as e:
            raise LLMProviderError(str(e), provider=self.provider_name)
        except ValueError as e:
            # body was not JSON
            raise LLMProviderError(f"Invalid JSON body: {e}", provider=self.provider_name)

    async def _generate(self, prompt: str) -> str:
        payload = await self._make_request(self._create_request_data(prompt))
        return self._extract_text(payload)
