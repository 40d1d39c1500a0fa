"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    ai_max_attempts: int = 5
    ai_initial_backoff_seconds: float = 1.0
    storage_backend: str = "file"
    storage_dir: str = ".vitality"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "app_state"
    timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
