"""Configuration management for the User API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEV_ENVIRONMENTS = frozenset({"development", "dev", "local"})

# apps/api, three levels above this file
_API_DIR = Path(__file__).resolve().parents[2]


def _env_file() -> Path:
    """Return $ENV_FILE if set, else apps/api/.env."""
    return Path(os.getenv("ENV_FILE") or _API_DIR / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "user-management-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"
    debug: bool = False

    # API
    api_host: str = "localhost"
    api_port: int = 8000

    # UI
    ui_url: str = "http://localhost:5173"

    # Store
    seed_users: bool = True

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment."""
        return self.environment.lower() in DEV_ENVIRONMENTS


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
