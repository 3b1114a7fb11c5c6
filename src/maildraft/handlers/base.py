"""Handler protocol and shared delivery flow.

A handler takes a :class:`~maildraft.draft.MessageDraft` and delivers it.
Concrete transports (SMTP, HTTP APIs, ...) live outside this package; they
only need to satisfy :class:`MailHandler`, or subclass :class:`BaseHandler`
and implement :meth:`BaseHandler.deliver`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from maildraft.exceptions import MailHandlerError
from maildraft.logging import TRACE_LEVEL
from maildraft.message import format_address

if TYPE_CHECKING:
    from maildraft.draft import MessageDraft
    from maildraft.message import MailMessage

log = logging.getLogger(__name__)


@runtime_checkable
class MailHandler(Protocol):
    """Protocol for objects able to deliver a draft.

    Examples:
        >>> def deliver(handler: MailHandler, draft: MessageDraft) -> None:
        ...     handler.send(draft, clear_after=True)
    """

    def send(self, draft: MessageDraft, *, clear_after: bool = True) -> Any:
        """Deliver *draft*.

        Args:
            draft: The draft to deliver.
            clear_after: Reset the draft after a successful delivery.

        Returns:
            Handler-specific delivery result.
        """
        ...


class BaseHandler(ABC):
    """Snapshot, deliver, then optionally reset the draft.

    Subclasses implement :meth:`deliver`. Exceptions other than
    :class:`MailHandlerError` raised by ``deliver`` are wrapped in one; the
    draft is only reset after a successful delivery.
    """

    def send(self, draft: MessageDraft, *, clear_after: bool = True) -> Any:
        """Deliver *draft* and reset it when *clear_after* is true.

        Raises:
            MailHandlerError: If delivery fails.
        """
        message = draft.snapshot()
        name = type(self).__name__

        if log.isEnabledFor(TRACE_LEVEL):
            log.log(
                TRACE_LEVEL,
                "[%s] From: %s, To: %s, Subject: %r",
                name,
                format_address(message.sender),
                message.to,
                message.subject,
            )

        try:
            result = self.deliver(message, draft)
        except MailHandlerError:
            raise
        except Exception as e:  # noqa: BLE001
            raise MailHandlerError(f"{name} failed to deliver message: {e}", handler=name) from e

        log.debug("Message delivered by %s to %s", name, ", ".join(message.recipients) or "(no recipients)")
        if clear_after:
            draft.reset()
        return result

    @abstractmethod
    def deliver(self, message: MailMessage, draft: MessageDraft) -> Any:
        """Deliver a message snapshot.

        Args:
            message: Immutable snapshot of the draft.
            draft: The draft itself, for access to options and environment.

        Returns:
            Handler-specific delivery result.
        """


__all__ = ["BaseHandler", "MailHandler"]
