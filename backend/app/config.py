"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the fixed listen address (127.0.0.1:3000)
    - get_settings() is cached (lru_cache): single instance per process
    - log_level is one of LOG_LEVELS, so run() never hands uvicorn an unknown name

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - HELLO_API_ prefix keeps generic names like PORT from leaking in from the host
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELLO_API_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "127.0.0.1"
    port: int = Field(3000, ge=1, le=65535)

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names uvicorn cannot map."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}",
            )
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
