"""Logging helpers for the misri command line."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None) -> int:
    """Map a level name or number to a logging level; unknown values give WARNING."""
    if value is None:
        return logging.WARNING
    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return logging.WARNING
    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """
    Configure the root logger for CLI entry points.

    When `level` is omitted the LOG_LEVEL environment variable is consulted.
    Remaining kwargs go to logging.basicConfig. Returns the effective level.
    """
    effective_level = _coerce_level(os.environ.get("LOG_LEVEL") if level is None else level)

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )
    return effective_level
