"""Application configuration and settings management."""
import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="PLACEBOOK_",
        extra="ignore",
    )

    app_name: str = "Placebook"

    # Database
    database_url: str = "sqlite+aiosqlite:///./placebook.db"
    sql_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: Annotated[List[str], NoDecode] = ["*"]

    # Accounts
    password_min_length: int = 8
    access_token_bytes: int = 128  # random bytes, hex encoded

    log_level: str = "INFO"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str) and value.lstrip().startswith("["):
            return json.loads(value)
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
