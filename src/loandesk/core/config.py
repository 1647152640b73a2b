# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; each group becomes a section future changes extend.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "Loan Desk API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Auth --
    ADMIN_USERNAME: str = Field(
        default="admin",
        description="Single administrator login. Demo credential, not for production use.",
    )
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_DISPLAY_NAME: str = "System Administrator"

    # -- Seeding --
    SEED_DEFAULT_DEPARTMENT: bool = Field(
        default=True,
        description="Create the Agriculture Department login when no departments exist.",
    )

    # -- UI affordance --
    LOGIN_DELAY_SECONDS: float = Field(
        default=0.0,
        ge=0.0,
        description="Artificial pause before answering a login request.",
    )
    SUBMIT_DELAY_SECONDS: float = Field(
        default=0.0,
        ge=0.0,
        description="Artificial pause before answering an application submission.",
    )


settings = Settings()
