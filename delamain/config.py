"""
delamain/config.py

Purpose
-------
Centralized settings for the delamain helpers.
- Reads environment variables (with legacy aliases) into typed fields.
- Provides the defaults used by the retry and timeout helpers when a caller
  does not pass explicit values.

Notes for Maintainers
---------------------
- A ``.env`` file in the working directory is honoured unless
  ``SETTINGS_SKIP_DOTENV=1`` is set (tests rely on this).
- ``reload_settings()`` rebuilds the singleton after the environment changed.

Examples
--------
# Bash:
export DELAMAIN_RETRY_MAX_ATTEMPTS=5
export DELAMAIN_RETRY_INITIAL_DELAY=0.25
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_RETRY_MAX_ATTEMPTS = 3
DEFAULT_RETRY_INITIAL_DELAY = 1.0
DEFAULT_TIMEOUT_SECONDS = 30.0


# -----------------------------
# Helper functions
# -----------------------------
def _coalesce_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty environment variable from *names*."""
    for name in names:
        val = os.getenv(name)
        if val is not None and str(val).strip() != "":
            return val
    return default


def _parse_int(value: Optional[str], *, default: int, name: str = "") -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning(
            "Invalid value for %s: expected integer but received %r. Using default %d.",
            name or "setting",
            value,
            default,
        )
        return default


def _parse_float(value: Optional[str], *, default: float, name: str = "") -> float:
    if value is None or str(value).strip() == "":
        return default
    try:
        return float(str(value).strip())
    except ValueError:
        logger.warning(
            "Invalid value for %s: expected number but received %r. Using default %s.",
            name or "setting",
            value,
            default,
        )
        return default


def _load_dotenv() -> None:
    if os.getenv("SETTINGS_SKIP_DOTENV") == "1":
        return
    if os.path.exists(".env"):
        load_dotenv(".env")


# -----------------------------
# Main Settings
# -----------------------------
class Settings(BaseSettings):
    # --- Retry defaults ---
    retry_max_attempts: int = Field(
        default_factory=lambda: _parse_int(
            _coalesce_env("DELAMAIN_RETRY_MAX_ATTEMPTS"),
            default=DEFAULT_RETRY_MAX_ATTEMPTS,
            name="DELAMAIN_RETRY_MAX_ATTEMPTS",
        )
    )
    retry_initial_delay: float = Field(
        default_factory=lambda: _parse_float(
            _coalesce_env("DELAMAIN_RETRY_INITIAL_DELAY"),
            default=DEFAULT_RETRY_INITIAL_DELAY,
            name="DELAMAIN_RETRY_INITIAL_DELAY",
        )
    )

    # --- Timeout defaults ---
    default_timeout: float = Field(
        default_factory=lambda: _parse_float(
            _coalesce_env("DELAMAIN_DEFAULT_TIMEOUT"),
            default=DEFAULT_TIMEOUT_SECONDS,
            name="DELAMAIN_DEFAULT_TIMEOUT",
        )
    )

    # --- Logging / dates ---
    log_level: str = Field(
        default_factory=lambda: _coalesce_env("DELAMAIN_LOG_LEVEL", "LOG_LEVEL")
        or "INFO"
    )
    timezone: str = Field(
        default_factory=lambda: _coalesce_env("DELAMAIN_TIMEZONE", "TZ_NAME") or "UTC"
    )

    model_config = SettingsConfigDict(case_sensitive=False)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment variables are read by the field factories above only.
        return (init_settings,)

    @field_validator("retry_max_attempts", mode="after")
    def _positive_attempts(cls, v: int) -> int:
        if v < 1:
            logger.warning(
                "DELAMAIN_RETRY_MAX_ATTEMPTS must be greater than zero; received %d. "
                "Using default %d.",
                v,
                DEFAULT_RETRY_MAX_ATTEMPTS,
            )
            return DEFAULT_RETRY_MAX_ATTEMPTS
        return v

    @field_validator("retry_initial_delay", "default_timeout", mode="after")
    def _non_negative_seconds(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            logger.warning(
                "%s must not be negative; received %s. Using 0.",
                info.field_name,
                v,
            )
            return 0.0
        return v

    @field_validator("log_level", mode="after")
    def _upper_log_level(cls, v: str) -> str:
        return v.strip().upper()


_load_dotenv()

# Singleton settings instance
settings = Settings()


def reload_settings() -> Settings:
    """Rebuild :data:`settings` from the current environment."""

    global settings
    _load_dotenv()
    settings = Settings()
    return settings


def get_settings() -> Settings:
    """Return the active settings; modules call this instead of caching."""

    return settings


__all__ = [
    "DEFAULT_RETRY_INITIAL_DELAY",
    "DEFAULT_RETRY_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT_SECONDS",
    "Settings",
    "get_settings",
    "reload_settings",
    "settings",
]
