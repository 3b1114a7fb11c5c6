"""Fluent mail drafts with pluggable delivery handlers.

Examples:
    >>> from maildraft import MemoryHandler, MessageDraft
    >>> handler = MemoryHandler()
    >>> draft = MessageDraft({"priority": 1}, handler=handler)
    >>> _ = draft.sender("noreply@example.com").to("user@example.com").subject("Hi").send()  # doctest: +SKIP
"""

from maildraft.draft import MessageDraft
from maildraft.environment import MailEnvironment
from maildraft.exceptions import (
    MailConfigurationError,
    MailDraftError,
    MailError,
    MailHandlerError,
)
from maildraft.handlers import BaseHandler, ConsoleHandler, MailHandler, MemoryHandler
from maildraft.message import Address, AttachmentSpec, MailMessage
from maildraft.options import MailFormat, MailOptions

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AttachmentSpec",
    "BaseHandler",
    "ConsoleHandler",
    "MailConfigurationError",
    "MailDraftError",
    "MailEnvironment",
    "MailError",
    "MailFormat",
    "MailHandler",
    "MailHandlerError",
    "MailMessage",
    "MailOptions",
    "MemoryHandler",
    "MessageDraft",
    "__version__",
]
