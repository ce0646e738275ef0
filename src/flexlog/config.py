"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from flexlog.domain.scores import Goal

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    default_maintenance: float = 2000
    default_goal: Goal = Goal.MAINTENANCE
    default_timezone: str = "UTC"
    rolling_window_days: int = 7
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
