"""Message body formats."""

from __future__ import annotations

from enum import Enum


class MailFormat(str, Enum):
    """Body format of a message.

    Attributes:
        TEXT: Plain-text message.
        HTML: HTML message (optionally with a plain-text alternative).
    """

    TEXT = "text"
    HTML = "html"


__all__ = ["MailFormat"]
