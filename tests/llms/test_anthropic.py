import httpx
import pytest
import anthropic
from unittest.mock import AsyncMock, MagicMock
from LYNK.config.llms import AnthropicConfig
from LYNK.llms.anthropic import AnthropicLLM
from LYNK.llms.utils.exceptions import (
    LLMConfigError,
    LLMRateLimitError,
    LLMResponseError,
)


@pytest.fixture
def llm():
    llm = AnthropicLLM(AnthropicConfig(api_key="test_key"))
    llm.client = MagicMock()
    llm.client.messages.create = AsyncMock()
    return llm


def text_block(text):
    block = MagicMock()
    block.text = text
    return block


@pytest.mark.asyncio
async def test_generate_joins_text_blocks(llm):
    llm.client.messages.create.return_value = MagicMock(
        content=[text_block("Claude "), text_block("answer")]
    )

    assert await llm.generate("hello") == "Claude answer"
    kwargs = llm.client.messages.create.await_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "hello"}]
    assert kwargs["max_tokens"] == 500
    assert set(kwargs) == {"model", "max_tokens", "messages", "temperature"}


@pytest.mark.asyncio
async def test_rate_limit_is_mapped(llm):
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    llm.client.messages.create.side_effect = anthropic.RateLimitError(
        "slow down", response=httpx.Response(429, request=request), body=None
    )

    with pytest.raises(LLMRateLimitError):
        await llm.generate("hello")


@pytest.mark.asyncio
async def test_empty_content_is_malformed(llm):
    llm.client.messages.create.return_value = MagicMock(content=[])

    with pytest.raises(LLMResponseError):
        await llm.generate("hello")


def test_requires_api_key():
    with pytest.raises(LLMConfigError):
        AnthropicLLM(AnthropicConfig())
