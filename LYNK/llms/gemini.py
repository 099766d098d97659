from typing import Any, Dict, Optional
from LYNK.config.llms.gemini import GeminiConfig
from LYNK.llms.http_provider import HttpLLM
from LYNK.llms.utils.utils import dig, require_text


class GeminiLLM(HttpLLM):
    """Google Gemini generateContent endpoint"""

    provider_name = "gemini"

    def __init__(self, config: Optional[GeminiConfig] = None):
        super().__init__(config or GeminiConfig())

    @property
    def endpoint(self) -> str:
        return f"{self.config.api_base_url}/models/{self.config.model}:generateContent"

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.config.api_key,
        }

    def _create_request_data(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_tokens,
            },
        }

    def _extract_text(self, payload: Any) -> str:
        text = dig(
            payload,
            ["candidates", 0, "content", "parts", 0, "text"],
            self.provider_name,
        )
        return require_text(text, self.provider_name)
