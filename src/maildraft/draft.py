"""Fluent message draft.

``MessageDraft`` holds the fields of a message being composed along with its
delivery options. Setters return the draft itself so calls can be chained::

    draft = (
        MessageDraft({"charset": "utf-8", "priority": 2}, handler=MemoryHandler())
        .sender("noreply@example.com", "Example")
        .to("user@example.com")
        .subject("Welcome")
        .message_text("Hello!")
    )
    draft.send()

Delivery is delegated to a :class:`~maildraft.handlers.MailHandler`. The
draft never validates address syntax, whatever ``options.validate`` says;
that flag is advisory for handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from maildraft.environment import MailEnvironment
from maildraft.exceptions import MailConfigurationError
from maildraft.message import DEFAULT_DISPOSITION, Address, AttachmentSpec, MailMessage
from maildraft.formats import MailFormat
from maildraft.options import MailOptions
from maildraft.validators import check_format, coerce_format

if TYPE_CHECKING:
    from maildraft.handlers.base import MailHandler

log = logging.getLogger(__name__)


def _named(email: str, name: str | None) -> Address:
    if name:
        return (email, name)
    return email


class MessageDraft:
    """Mutable mail draft with a fluent interface.

    Args:
        config: Option mapping (unknown keys ignored) or a ready ``MailOptions``.
        handler: Handler used by :meth:`send`.
        environment: Host capabilities; detected on first use when omitted.

    Examples:
        >>> draft = MessageDraft({"charset": "iso-8859-1", "colour": "blue"})
        >>> draft.charset
        'ISO-8859-1'
        >>> draft.sender("a@example.com", "Alice").snapshot().sender
        ('a@example.com', 'Alice')
    """

    def __init__(
        self,
        config: Mapping[str, Any] | MailOptions | None = None,
        *,
        handler: MailHandler | None = None,
        environment: MailEnvironment | None = None,
    ) -> None:
        if isinstance(config, MailOptions):
            self._options = config
        else:
            self._options = MailOptions.from_mapping(config)
        self._handler = handler
        self._environment = environment
        self._attachments: list[AttachmentSpec] = []
        self._headers: dict[str, str] = {}
        self.reset()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(to={self._to!r}, subject={self._subject!r}, "
            f"format={getattr(self._format, 'value', self._format)!r}, attachments={len(self._attachments)})"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def options(self) -> MailOptions:
        """Return the delivery options."""
        return self._options

    @property
    def environment(self) -> MailEnvironment:
        """Return the host capabilities, detecting them on first access."""
        if self._environment is None:
            self._environment = MailEnvironment.detect()
        return self._environment

    @property
    def charset(self) -> str:
        """Return the upper-cased character set."""
        return self._options.charset

    @property
    def priority(self) -> int:
        """Return the X-Priority value."""
        return self._options.priority

    @property
    def headers(self) -> dict[str, str]:
        """Return a copy of the extra headers."""
        return dict(self._headers)

    @property
    def attachments(self) -> tuple[AttachmentSpec, ...]:
        """Return the attachment metadata recorded so far."""
        return tuple(self._attachments)

    def snapshot(self) -> MailMessage:
        """Return an immutable copy of the current message fields."""
        return MailMessage(
            sender=self._sender,
            to=self._to,
            cc=self._cc,
            bcc=self._bcc,
            reply_to=self._reply_to,
            subject=self._subject,
            text_message=self._text_message,
            html_message=self._html_message,
            format=self._format,
            headers=self._headers,
            attachments=tuple(self._attachments),
        )

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def handler(self, handler: MailHandler) -> MessageDraft:
        """Set the handler used by :meth:`send`."""
        self._handler = handler
        return self

    def to(self, email: str) -> MessageDraft:
        """Set the primary recipient."""
        self._to = email
        return self

    def sender(self, email: str, name: str | None = None) -> MessageDraft:
        """Set the From address.

        Args:
            email: Sender address.
            name: Optional display name; when given the sender is stored as
                an ``(email, name)`` pair.
        """
        self._sender = _named(email, name)
        return self

    def cc(self, email: str) -> MessageDraft:
        """Set a single carbon-copy recipient."""
        self._cc = email
        return self

    def bcc(self, email: str) -> MessageDraft:
        """Set a single blind carbon-copy recipient."""
        self._bcc = email
        return self

    def reply_to(self, email: str, name: str | None = None) -> MessageDraft:
        """Set the Reply-To address, optionally with a display name."""
        self._reply_to = _named(email, name)
        return self

    def subject(self, subject: str) -> MessageDraft:
        """Set the subject line."""
        self._subject = subject
        return self

    def message_html(self, message: str) -> MessageDraft:
        """Set the HTML body."""
        self._html_message = message
        return self

    def message_text(self, message: str) -> MessageDraft:
        """Set the plain-text body."""
        self._text_message = message
        return self

    def format(self, fmt: str | MailFormat) -> MessageDraft:
        """Set the delivery format, usually ``text`` or ``html``.

        Known names are stored as a ``MailFormat`` whatever their case; other
        values are stored as given and logged at WARNING.
        """
        issue = check_format(fmt, option="format")
        if issue:
            log.warning("Unusual mail format: %s", issue)
        self._format = coerce_format(fmt)
        return self

    def set_header(self, field: str, value: str) -> MessageDraft:
        """Set an extra header; setting the same field again replaces it."""
        self._headers[field] = value
        return self

    def attach(
        self,
        filename: str,
        disposition: str | None = None,
        rename: str | None = None,
        mime: str | None = None,
    ) -> MessageDraft:
        """Record an attachment.

        Only metadata is stored; the file is neither opened nor encoded.

        Args:
            filename: Path or URL of the file.
            disposition: ``attachment`` (default) or ``inline``.
            rename: Name presented to the recipient.
            mime: Explicit MIME type.
        """
        spec = AttachmentSpec(
            filename=filename,
            disposition=disposition or DEFAULT_DISPOSITION,
            rename=rename,
            mime=mime,
        )
        self._attachments.append(spec)
        log.debug("Attachment recorded: %s (%s)", spec.display_name, spec.disposition)
        return self

    def set_message(self, message: MailMessage) -> MessageDraft:
        """Copy the fields of *message* into this draft.

        Fields that are ``None`` on *message* leave the draft untouched, the
        format included: a message built without one keeps the draft format.
        Headers are merged (message values win) and attachments appended.
        """
        if message.sender is not None:
            self._sender = message.sender
        if message.to is not None:
            self._to = message.to
        if message.cc is not None:
            self._cc = message.cc
        if message.bcc is not None:
            self._bcc = message.bcc
        if message.reply_to is not None:
            self._reply_to = message.reply_to
        if message.subject is not None:
            self._subject = message.subject
        if message.text_message is not None:
            self._text_message = message.text_message
        if message.html_message is not None:
            self._html_message = message.html_message
        if message.format is not None:
            self._format = coerce_format(message.format)
        self._headers.update(message.headers)
        self._attachments.extend(message.attachments)
        return self

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def send(self, clear_after: bool = True) -> Any:
        """Deliver the draft through the configured handler.

        Args:
            clear_after: Reset the draft once the handler succeeds.

        Returns:
            Whatever the handler returns.

        Raises:
            MailConfigurationError: If no handler is configured.
            MailHandlerError: If delivery fails.
        """
        if self._handler is None:
            raise MailConfigurationError("No mail handler configured for this draft")
        return self._handler.send(self, clear_after=clear_after)

    def reset(self, clear_attachments: bool = True) -> MessageDraft:
        """Clear message fields so the draft can be reused.

        Addresses, subject, bodies and headers are cleared and the format
        returns to ``options.mailtype``. Options and handler are kept.

        Args:
            clear_attachments: Also drop recorded attachments.
        """
        self._to: str | None = None
        self._sender: Address | None = None
        self._reply_to: Address | None = None
        self._cc: str | None = None
        self._bcc: str | None = None
        self._subject: str | None = None
        self._html_message: str | None = None
        self._text_message: str | None = None
        self._format: MailFormat | str = self._options.mailtype
        self._headers.clear()
        if clear_attachments:
            self._attachments.clear()
        return self


__all__ = ["MessageDraft"]
