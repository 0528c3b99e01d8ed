"""Lightweight configuration for the Barnyard service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from ``BARNYARD_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARNYARD_", env_file=".env", env_file_encoding="utf-8"
    )

    database_url: str = Field(
        default="sqlite:///barnyard.db", description="SQLAlchemy database URL"
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements to the log")
    barn_capacity: int = Field(
        default=20,
        description="Number of animals a single barn can hold; shared by every barn",
        gt=0,
    )
    barn_name_prefix: str = Field(
        default="barn", min_length=1, description="Prefix used for generated barn names"
    )
    log_level: str = Field(default="INFO", description="Root log level for the CLI")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
