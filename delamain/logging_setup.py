"""Process-wide logging configuration for applications using delamain."""

from __future__ import annotations

import logging
from typing import Union

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if isinstance(resolved, int):
        return resolved
    logging.getLogger(__name__).warning(
        "Unknown log level %r; falling back to INFO.", level
    )
    return logging.INFO


def configure_logging(level: Union[int, str, None] = None) -> None:
    """Configure structured logging once per process.

    A stream handler is only attached when the root logger has none, so host
    applications that already configured logging keep their handlers. The
    level is applied on every call.
    """

    global _configured

    root_logger = logging.getLogger()
    if not _configured:
        if not root_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(handler)
        _configured = True

    root_logger.setLevel(_resolve_level(level))


__all__ = ["LOG_FORMAT", "configure_logging"]
