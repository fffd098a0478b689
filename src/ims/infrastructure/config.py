"""Runtime configuration.

Values come from ``IMS_*`` environment variables or a ``.env`` file and
are read once per process. The database part is handed to the
persistence layer as an explicit ``DatabaseConfig`` value.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class DatabaseConfig:
    url: str
    pool_size: int = 10


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    database_url: str = Field(default="sqlite:///./inventory.db")
    pool_size: int = Field(default=10, ge=1)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    def database_config(self) -> DatabaseConfig:
        return DatabaseConfig(url=self.database_url, pool_size=self.pool_size)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
