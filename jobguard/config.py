from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )
    gemini_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_temperature: Optional[float] = None

    min_input_chars: int = 50
    max_retries: int = 5
    backoff_base_seconds: float = 1.0
    retry_client_errors: bool = True

    history_capacity: int = 5
    title_preview_chars: int = 30


settings = Settings()
