import asyncio
import pytest
from LYNK.llms import GENERATION_FAILED, FallbackLLMClient, is_generation_failure
from LYNK.llms.utils.exceptions import LLMProviderError, LLMResponseError
from tests.mocks import FailingLLM, MockLLM


@pytest.mark.asyncio
async def test_primary_success_is_returned_unmodified():
    primary = MockLLM(default="  primary text \n")
    secondary = MockLLM(default="secondary text")
    client = FallbackLLMClient([primary, secondary])

    assert await client.generate("prompt") == "  primary text \n"
    assert secondary.prompts == []


@pytest.mark.asyncio
async def test_secondary_serves_when_primary_fails():
    primary = FailingLLM(LLMProviderError("boom", provider="primary"), name="primary")
    secondary = MockLLM(default="secondary text")
    tertiary = MockLLM(default="tertiary text")
    client = FallbackLLMClient([primary, secondary, tertiary])

    result = await client.generate("same prompt")

    assert result == "secondary text"
    assert primary.calls == 1
    assert secondary.prompts == ["same prompt"]
    assert tertiary.prompts == []


@pytest.mark.asyncio
async def test_malformed_response_advances_chain():
    primary = FailingLLM(LLMResponseError("no choices", provider="primary"))
    secondary = FailingLLM(RuntimeError("unexpected"))
    tertiary = MockLLM(default="tertiary text")
    client = FallbackLLMClient([primary, secondary, tertiary])

    assert await client.generate("p") == "tertiary text"
    assert secondary.calls == 1


@pytest.mark.asyncio
async def test_all_failing_returns_sentinel():
    providers = [
        FailingLLM(LLMProviderError("down"), name="primary"),
        FailingLLM(asyncio.TimeoutError(), name="secondary"),
        FailingLLM(ValueError("bad json"), name="tertiary"),
    ]
    client = FallbackLLMClient(providers)

    result = await client.generate("p")

    assert result == GENERATION_FAILED
    assert is_generation_failure(result)
    assert [p.calls for p in providers] == [1, 1, 1]


@pytest.mark.asyncio
async def test_empty_chain_returns_sentinel():
    assert await FallbackLLMClient([]).generate("p") == GENERATION_FAILED


@pytest.mark.asyncio
async def test_each_call_restarts_at_primary():
    primary = FailingLLM(LLMProviderError("down"))
    secondary = MockLLM(default="ok")
    client = FallbackLLMClient([primary, secondary])

    await client.generate("one")
    await client.generate("two")

    assert primary.calls == 2
    assert secondary.prompts == ["one", "two"]


@pytest.mark.asyncio
async def test_cancellation_is_not_swallowed():
    primary = FailingLLM(asyncio.CancelledError())
    secondary = MockLLM(default="should not be used")
    client = FallbackLLMClient([primary, secondary])

    with pytest.raises(asyncio.CancelledError):
        await client.generate("p")
    assert secondary.prompts == []


def test_provider_names():
    client = FallbackLLMClient([MockLLM(), FailingLLM(RuntimeError(), name="backup")])
    assert client.provider_names == ["mock", "backup"]
