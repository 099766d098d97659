from typing import List, Optional
from pathlib import Path
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from LYNK.config.database_config import MongoDBConfig

# Project root (the directory holding setup.py)
ROOT_DIR = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    # MongoDB
    MONGO_URL: str = Field(
        default="mongodb://localhost:27017/keeplynk_ai",
        validation_alias=AliasChoices("MONGO_URL", "MONGODB_URI"),
    )
    MONGO_DATABASE: str = "keeplynk_ai"
    MEMORY_COLLECTION: str = "agent_memory"
    # "mongodb", "memory" or "none"
    MEMORY_BACKEND: str = "mongodb"

    # LLM providers, tried in this order
    LLM_PROVIDERS: str = "groq,gemini,huggingface"
    LLM_OFFLINE: bool = False
    LLM_TIMEOUT: float = 30.0
    GROQ_API_KEY: Optional[str] = Field(default=None, repr=False)
    GEMINI_API_KEY: Optional[str] = Field(default=None, repr=False)
    HF_API_KEY: Optional[str] = Field(default=None, repr=False)
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None, repr=False)

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ROOT_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def provider_order(self) -> List[str]:
        return [
            name.strip().lower()
            for name in self.LLM_PROVIDERS.split(",")
            if name.strip()
        ]

    def api_key_for(self, provider: str) -> Optional[str]:
        return {
            "groq": self.GROQ_API_KEY,
            "gemini": self.GEMINI_API_KEY,
            "huggingface": self.HF_API_KEY,
            "anthropic": self.ANTHROPIC_API_KEY,
        }.get(provider)

    def mongodb(self) -> MongoDBConfig:
        return MongoDBConfig(
            uri=self.MONGO_URL,
            database=self.MONGO_DATABASE,
            memory_collection=self.MEMORY_COLLECTION,
        )


def get_settings(**overrides) -> Settings:
    return Settings(**overrides)
