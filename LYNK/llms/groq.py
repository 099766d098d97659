from typing import Any, Dict, Optional
from LYNK.config.llms.groq import GroqConfig
from LYNK.llms.http_provider import HttpLLM
from LYNK.llms.utils.utils import chat_messages, dig, require_text


class GroqLLM(HttpLLM):
    """Groq chat completions (OpenAI-compatible API)"""

    provider_name = "groq"

    def __init__(self, config: Optional[GroqConfig] = None):
        super().__init__(config or GroqConfig())

    @property
    def endpoint(self) -> str:
        return f"{self.config.api_base_url}/chat/completions"

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def _create_request_data(self, prompt: str) -> Dict[str, Any]:
        return {
            **self.config.to_dict(),
            "messages": chat_messages(prompt),
        }

    def _extract_text(self, payload: Any) -> str:
        content = dig(payload, ["choices", 0, "message", "content"], self.provider_name)
        return require_text(content, self.provider_name)
