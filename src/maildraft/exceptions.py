"""Exceptions raised while composing and handing off mail drafts.

Exception hierarchy::

    MailDraftError
        MailError (base for all mail errors)
            MailConfigurationError (unusable configuration such as a missing handler, also ValueError)
            MailHandlerError (delivery failed inside a handler)

Option values and addresses are never rejected while composing a draft;
unusual option values are only logged.
"""

from __future__ import annotations

from maildraft.config.exceptions import MailDraftError


class MailError(MailDraftError):
    """Base exception for all mail composition and delivery errors."""


class MailConfigurationError(MailError, ValueError):
    """The draft cannot be used as configured (no handler, unknown charset, ...).

    Attributes:
        option: Name of the offending option, when known.
    """

    def __init__(self, message: str, *, option: str | None = None) -> None:
        """Initialize MailConfigurationError.

        Args:
            message: Human-readable error message.
            option: Name of the offending option.
        """
        super().__init__(message)
        self.option = option


class MailHandlerError(MailError):
    """A handler failed to deliver a draft.

    Attributes:
        handler: Name of the handler class that failed.
    """

    def __init__(self, message: str, *, handler: str | None = None) -> None:
        """Initialize MailHandlerError.

        Args:
            message: Human-readable error message.
            handler: Name of the handler class that failed.
        """
        super().__init__(message)
        self.handler = handler


__all__ = [
    "MailConfigurationError",
    "MailDraftError",
    "MailError",
    "MailHandlerError",
]
