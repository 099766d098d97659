from typing import List, Optional, Sequence
from LYNK.llms.base import AsyncLLMBase
from LYNK.utils import Logger

logger = Logger.get_logger(__name__)

GENERATION_FAILED = "AI generation failed - all providers unavailable"


def is_generation_failure(text: Optional[str]) -> bool:
    return text == GENERATION_FAILED


class FallbackLLMClient(AsyncLLMBase):
    """
    Tries each provider in priority order and returns the first success.

    Every provider gets exactly one attempt per call. A failure of any kind
    (network error, timeout, bad status, malformed body) advances the chain.
    When the chain is exhausted the GENERATION_FAILED sentinel is returned,
    so callers always receive a string. Cancellation is not a failure and
    propagates to the caller.
    """

    provider_name = "fallback"

    def __init__(self, providers: Sequence[AsyncLLMBase]):
        super().__init__()
        self.providers: List[AsyncLLMBase] = list(providers)

    @property
    def provider_names(self) -> List[str]:
        return [provider.name for provider in self.providers]

    async def _generate(self, prompt: str) -> str:
        for index, provider in enumerate(self.providers):
            try:
                text = await provider.generate(prompt)
            except Exception as e:
                next_name = (
                    self.providers[index + 1].name
                    if index + 1 < len(self.providers)
                    else None
                )
                if next_name:
                    logger.warning(
                        f"{provider.name} failed ({type(e).__name__}: {e}), "
                        f"falling back to {next_name}"
                    )
                else:
                    logger.error(
                        f"{provider.name} failed ({type(e).__name__}: {e}), "
                        f"no providers left"
                    )
                continue
            if index > 0:
                logger.info(f"Generation served by fallback provider {provider.name}")
            return text

        logger.error("All LLM providers failed")
        return GENERATION_FAILED
