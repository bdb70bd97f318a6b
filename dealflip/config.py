"""Application configuration settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (no default: the service refuses to start without one)
    database_url: str

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Environment
    environment: str = "development"

    # Every router is mounted under this prefix
    api_prefix: str = "/api"

    # LLM provider (OpenAI-compatible chat completions)
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o"
    openai_timeout_seconds: float = 60.0

    # Principal used when a request carries no X-User-Id header
    demo_user_id: int = 1
    seed_demo_data: bool = True

    # Deal alert scanning
    scheduler_enabled: bool = True
    alert_scan_interval_seconds: int = 900  # 15 minutes

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
