"""Process configuration.

Loaded from ``HOMEDASH_*`` environment variables and an optional ``.env``
file. The composition root takes a ``Settings`` explicitly; only the CLI
entry point calls ``get_settings()``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="HOMEDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding one JSON file per collection",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output",
    )
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=16,
        description="bcrypt work factor for user and household passwords",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: '{v}'")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, loaded once.

    Call ``get_settings.cache_clear()`` to reload.
    """
    return Settings()
