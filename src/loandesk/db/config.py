# This project was developed with assistance from AI tools.
"""Store configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Key-value store settings -- reads from environment variables.

    ``STORE_URL`` is either ``memory://`` for a process-local store or any
    SQLAlchemy URL for a durable one.
    """

    model_config = SettingsConfigDict(extra="ignore")

    STORE_URL: str = "sqlite:///loandesk.db"
    SQL_ECHO: bool = False


store_settings = StoreSettings()
