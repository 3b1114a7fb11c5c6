"""Logging helpers for maildraft."""

from maildraft.logging.manager import (
    FALLBACK_DEFAULTS,
    FALLBACK_PRESETS,
    SUCCESS_LEVEL,
    TRACE_LEVEL,
    LogManager,
)

__all__ = [
    "FALLBACK_DEFAULTS",
    "FALLBACK_PRESETS",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
