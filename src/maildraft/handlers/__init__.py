"""Handlers delivering message drafts.

Available handlers:
    - MemoryHandler: keeps delivered messages in an outbox list
    - ConsoleHandler: prints messages on a rich console
"""

from maildraft.handlers.base import BaseHandler, MailHandler
from maildraft.handlers.console import ConsoleHandler
from maildraft.handlers.memory import MemoryHandler

__all__ = [
    "BaseHandler",
    "ConsoleHandler",
    "MailHandler",
    "MemoryHandler",
]
