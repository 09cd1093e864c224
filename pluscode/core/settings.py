from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pluscode.constants import DEFAULT_CODE_LENGTH, MAX_CODE_LENGTH, MIN_CODE_LENGTH


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODE_",
        case_sensitive=False,
    )

    # Length used by Codec.encode when the caller does not pass one.
    default_code_length: int = Field(
        default=DEFAULT_CODE_LENGTH, ge=MIN_CODE_LENGTH, le=MAX_CODE_LENGTH
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
