from typing import Any, Dict, Optional
from LYNK.config.llms.huggingface import HuggingFaceConfig
from LYNK.llms.http_provider import HttpLLM
from LYNK.llms.utils.utils import dig, require_text


class HuggingFaceLLM(HttpLLM):
    """HuggingFace hosted inference API"""

    provider_name = "huggingface"

    def __init__(self, config: Optional[HuggingFaceConfig] = None):
        super().__init__(config or HuggingFaceConfig())

    @property
    def endpoint(self) -> str:
        return f"{self.config.api_base_url}/{self.config.model}"

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def _create_request_data(self, prompt: str) -> Dict[str, Any]:
        return {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self.config.max_tokens,
                "temperature": self.config.temperature,
                "return_full_text": self.config.return_full_text,
            },
        }

    def _extract_text(self, payload: Any) -> str:
        text = dig(payload, [0, "generated_text"], self.provider_name)
        return require_text(text, self.provider_name)
