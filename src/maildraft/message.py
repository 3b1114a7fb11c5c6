"""Immutable message representation exchanged between drafts and handlers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import Union

from maildraft.formats import MailFormat

#: A bare address, or an ``(address, display name)`` pair.
Address = Union[str, tuple[str, str]]

#: Default disposition for attachments.
DEFAULT_DISPOSITION = "attachment"


def format_address(address: Address | None) -> str:
    """Render an address as ``Name <email>`` or the bare email.

    Examples:
        >>> format_address(("a@example.com", "Alice"))
        'Alice <a@example.com>'
        >>> format_address(None)
        ''
    """
    if address is None:
        return ""
    if isinstance(address, tuple):
        email, name = address
        return f"{name} <{email}>"
    return address


@dataclass(frozen=True, slots=True)
class AttachmentSpec:
    """Metadata describing a file to attach.

    Nothing is read from disk; handlers decide how to load and encode the file.

    Attributes:
        filename: Path or URL of the file.
        disposition: ``attachment`` or ``inline``.
        rename: Name presented to the recipient, if different.
        mime: Explicit MIME type, if known.
    """

    filename: str
    disposition: str = DEFAULT_DISPOSITION
    rename: str | None = None
    mime: str | None = None

    @property
    def display_name(self) -> str:
        """Return the name the recipient sees."""
        return self.rename or PurePath(self.filename).name


@dataclass(frozen=True, slots=True)
class MailMessage:
    """Snapshot of a composed message.

    Attributes:
        sender: From address.
        to: Primary recipient.
        cc: Carbon-copy recipient.
        bcc: Blind carbon-copy recipient.
        reply_to: Reply-To address.
        subject: Subject line.
        text_message: Plain-text body.
        html_message: HTML body.
        format: Format the message should be delivered in, or ``None`` to
            leave the choice to the draft (see ``MessageDraft.set_message``).
        headers: Extra headers (read-only view).
        attachments: Attachment metadata.

    Examples:
        >>> message = MailMessage(sender="a@example.com", to="b@example.com", subject="Hi")
        >>> message.recipients
        ['b@example.com']
    """

    sender: Address | None = None
    to: str | None = None
    cc: str | None = None
    bcc: str | None = None
    reply_to: Address | None = None
    subject: str | None = None
    text_message: str | None = None
    html_message: str | None = None
    format: MailFormat | str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    attachments: tuple[AttachmentSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "attachments", tuple(self.attachments))

    @property
    def recipients(self) -> list[str]:
        """Return every set recipient address (to, cc, bcc)."""
        return [address for address in (self.to, self.cc, self.bcc) if address]


__all__ = [
    "DEFAULT_DISPOSITION",
    "Address",
    "AttachmentSpec",
    "MailMessage",
    "format_address",
]
