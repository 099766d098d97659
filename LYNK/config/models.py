class GroqModels:
    LLAMA_70B = "llama-3.3-70b-versatile"
    LLAMA_8B = "llama-3.1-8b-instant"


class GeminiModels:
    FLASH = "gemini-1.5-flash"


class HuggingFaceModels:
    MISTRAL_7B = "mistralai/Mistral-7B-Instruct-v0.3"


class AnthropicModels:
    HAIKU = "claude-3-haiku-20240307"
    SONNET = "claude-3-5-sonnet-20241022"
