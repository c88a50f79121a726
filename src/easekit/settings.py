"""
Library settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for sampling and the command line tool."""

    model_config = SettingsConfigDict(
        env_prefix="EASEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Curve used by the CLI when none is named
    default_easing: str = "linear"

    # Points per sampled curve, both endpoints included
    sample_steps: int = Field(default=11, ge=2)

    # Digits printed by the CLI
    precision: int = Field(default=6, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
