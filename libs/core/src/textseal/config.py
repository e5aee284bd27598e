from __future__ import annotations
"""Environment-driven settings.

Values are read at call time so tests (and long-lived callers) can change the
environment without re-importing anything.
"""

import logging
import os

from .formats import TextFormat
from .genpass import DEFAULT_LENGTH


def log_level() -> int:
    name = os.getenv("TEXTSEAL_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"TEXTSEAL_LOG_LEVEL must be a logging level name, got {name!r}")
    return level


def default_format() -> TextFormat:
    override = os.getenv("TEXTSEAL_FORMAT")
    if override:
        try:
            return TextFormat.parse(override)
        except ValueError as exc:
            raise ValueError(f"TEXTSEAL_FORMAT: {exc}") from exc
    return TextFormat.BLAKE3


def password_length() -> int:
    override = os.getenv("TEXTSEAL_PASSWORD_LENGTH")
    if override:
        try:
            return int(override)
        except ValueError as exc:
            raise ValueError("TEXTSEAL_PASSWORD_LENGTH must be an integer") from exc
    return DEFAULT_LENGTH
