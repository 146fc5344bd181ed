"""Centralized, typed configuration using pydantic-settings.

Provides a ``Settings`` class backed by a ``.env`` file and environment
variables, and a cached ``get_settings()`` accessor. Pricing rates are code
constants, not deployment settings.

This module has no imports from the rest of the ``ratecard`` package so it
can be loaded first.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables and ``.env``.

    Attributes:
        production: JSON logs at INFO when ``True``, console logs at DEBUG
            otherwise.
        log_level: Optional level name overriding the mode's default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    production: bool = False
    log_level: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> object:
        """Accept standard level names case-insensitively; blank means unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        name = str(v).strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return name


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
