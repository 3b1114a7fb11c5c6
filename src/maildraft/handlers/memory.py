"""In-memory handler collecting delivered messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from maildraft.handlers.base import BaseHandler

if TYPE_CHECKING:
    from maildraft.draft import MessageDraft
    from maildraft.message import MailMessage


class MemoryHandler(BaseHandler):
    """Store every delivered message in :attr:`outbox`.

    Examples:
        >>> handler = MemoryHandler()
        >>> MessageDraft(handler=handler).to("user@example.com").send()  # doctest: +SKIP
        >>> handler.outbox[0].to  # doctest: +SKIP
        'user@example.com'
    """

    def __init__(self) -> None:
        self.outbox: list[MailMessage] = []

    def deliver(self, message: MailMessage, draft: MessageDraft) -> MailMessage:
        """Append *message* to the outbox and return it."""
        self.outbox.append(message)
        return message

    def clear(self) -> None:
        """Empty the outbox."""
        self.outbox.clear()


__all__ = ["MemoryHandler"]
