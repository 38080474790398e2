from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Wayfarer API"
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    openai_api_key: str = Field(default="", description="Optional OpenAI API key")
    openai_model_flows: str = "gpt-4.1-mini"
    openai_model_chat: str = "gpt-4.1-mini"
    openai_temperature: float = 0.7
    openai_timeout_seconds: float = 30.0

    currency_symbol: str = "₹"
    supported_languages: List[str] = Field(default_factory=lambda: ["en", "hi", "es", "fr", "bn", "ta"])

    telemetry_reference_prefix: str = "NATPAC"
    tracking_idle_timeout_seconds: float = 1800.0

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
