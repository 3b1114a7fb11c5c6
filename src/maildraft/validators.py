"""Sanity checks for mail delivery options.

Checks never raise: each returns a human-readable description of the
problem, or ``None`` when the value looks right. Callers store the value as
given and log the description. Addresses, subjects and bodies are not
checked at all.
"""

from __future__ import annotations

from typing import Any

from maildraft.formats import MailFormat

# ============================================================================
# Constants - Expected Ranges
# ============================================================================

#: Lowest X-Priority value (highest urgency).
MIN_PRIORITY = 1

#: Highest X-Priority value (lowest urgency).
MAX_PRIORITY = 5

#: Supported newline / CRLF sequences.
ALLOWED_LINE_ENDINGS = frozenset({"\n", "\r\n"})


# ============================================================================
# Check Functions
# ============================================================================


def check_priority(value: Any, *, option: str = "priority") -> str | None:
    """Describe what is odd about an X-Priority value.

    Examples:
        >>> check_priority(3) is None
        True
        >>> check_priority(9)
        'priority should be between 1 and 5, got 9'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return f"{option} should be an integer, got {type(value).__name__}"
    if not MIN_PRIORITY <= value <= MAX_PRIORITY:
        return f"{option} should be between {MIN_PRIORITY} and {MAX_PRIORITY}, got {value}"
    return None


def check_line_ending(value: Any, *, option: str = "newline") -> str | None:
    """Describe a newline or CRLF sequence other than ``"\\n"`` / ``"\\r\\n"``."""
    if value not in ALLOWED_LINE_ENDINGS:
        return f"{option} should be '\\n' or '\\r\\n', got {value!r}"
    return None


def check_text_option(value: Any, *, option: str) -> str | None:
    """Describe an empty or non-string ``charset`` / ``useragent`` value."""
    if not isinstance(value, str) or not value.strip():
        return f"{option} should be a non-empty string, got {value!r}"
    return None


def check_flag(value: Any, *, option: str) -> str | None:
    """Describe a feature flag that is not a boolean."""
    if not isinstance(value, bool):
        return f"{option} should be a boolean, got {type(value).__name__}"
    return None


def check_batch_size(value: Any, *, option: str = "bcc_batch_size") -> str | None:
    """Describe a BCC batch size that is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return f"{option} should be a positive integer, got {value!r}"
    return None


def coerce_format(value: Any) -> MailFormat | Any:
    """Return the matching ``MailFormat``, or *value* unchanged.

    Examples:
        >>> coerce_format("HTML")
        <MailFormat.HTML: 'html'>
        >>> coerce_format("markdown")
        'markdown'
    """
    if isinstance(value, MailFormat):
        return value
    if isinstance(value, str):
        try:
            return MailFormat(value.lower())
        except ValueError:
            return value
    return value


def check_format(value: Any, *, option: str = "mailtype") -> str | None:
    """Describe a format that is neither ``text`` nor ``html``."""
    if not isinstance(coerce_format(value), MailFormat):
        return f"{option} should be 'text' or 'html', got {value!r}"
    return None


__all__ = [
    "ALLOWED_LINE_ENDINGS",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "check_batch_size",
    "check_flag",
    "check_format",
    "check_line_ending",
    "check_priority",
    "check_text_option",
    "coerce_format",
]
