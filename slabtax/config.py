from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))
    log_level: str = Field(default_factory=lambda: os.getenv("SLABTAX_LOG_LEVEL", "INFO"))
    log_dir: str = Field(default_factory=lambda: os.getenv("SLABTAX_LOG_DIR", "logs"))
    file_logging: bool = Field(default_factory=lambda: _env_bool("SLABTAX_FILE_LOGGING", False))
    show_disclaimer: bool = Field(default_factory=lambda: _env_bool("SLABTAX_SHOW_DISCLAIMER", True))
    default_salaried: bool = Field(default_factory=lambda: _env_bool("SLABTAX_DEFAULT_SALARIED", False))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if not isinstance(logging.getLevelName(upper), int):
            raise ValueError(f"SLABTAX_LOG_LEVEL must be a logging level name, got {upper}")
        return upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
