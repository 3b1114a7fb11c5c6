"""Handler printing messages to a rich console instead of delivering them.

Useful during development: the message headers, bodies and attachment
metadata are rendered in a panel. No MIME encoding takes place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box as rich_box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from maildraft.exceptions import MailConfigurationError
from maildraft.handlers.base import BaseHandler
from maildraft.message import format_address

if TYPE_CHECKING:
    from maildraft.draft import MessageDraft
    from maildraft.message import MailMessage


class ConsoleHandler(BaseHandler):
    """Render delivered messages on a :class:`rich.console.Console`.

    Args:
        console: Target console (defaults to a new stdout console).
        show_bodies: Include the text and HTML bodies in the output.

    Examples:
        >>> handler = ConsoleHandler(console=Console(record=True))
        >>> MessageDraft(handler=handler).to("user@example.com").send()  # doctest: +SKIP
    """

    def __init__(self, console: Console | None = None, *, show_bodies: bool = True) -> None:
        self._console = console or Console()
        self._show_bodies = show_bodies

    @property
    def console(self) -> Console:
        """Return the console messages are printed on."""
        return self._console

    def deliver(self, message: MailMessage, draft: MessageDraft) -> Panel:
        """Print *message* and return the rendered panel."""
        panel = self.render(message, draft)
        self._console.print(panel)
        return panel

    def render(self, message: MailMessage, draft: MessageDraft) -> Panel:
        """Build the panel for *message* without printing it.

        The ``Size`` row gives the encoded length of the bodies in the draft
        charset; it is left out when the charset is not a known codec.
        """
        options = draft.options
        environment = draft.environment
        table = Table(box=rich_box.SIMPLE, show_header=False, pad_edge=False)
        table.add_column("field", style="bold")
        table.add_column("value")

        rows = [
            ("From", format_address(message.sender)),
            ("To", message.to or ""),
            ("Cc", message.cc or ""),
            ("Bcc", message.bcc or ""),
            ("Reply-To", format_address(message.reply_to)),
            ("Subject", message.subject or ""),
            ("X-Priority", str(options.priority)),
            ("X-Mailer", options.useragent),
            ("Charset", str(options.charset)),
            ("Format", str(getattr(message.format, "value", message.format) or "")),
            ("Host", environment.hostname),
            ("Size", self._body_size(message, draft)),
        ]
        rows.extend(message.headers.items())
        for field_name, value in rows:
            if value:
                table.add_row(field_name, Text(str(value)))

        for attachment in message.attachments:
            mime = attachment.mime or "auto"
            table.add_row("Attachment", Text(f"{attachment.display_name} ({attachment.disposition}, {mime})"))

        parts: list[Table | Text] = [table]
        if self._show_bodies:
            if message.text_message:
                parts.append(Text(message.text_message))
            if message.html_message:
                parts.append(Text(message.html_message, style="dim"))

        return Panel(Group(*parts), title=escape(message.subject or "(no subject)"), title_align="left")

    @staticmethod
    def _body_size(message: MailMessage, draft: MessageDraft) -> str:
        bodies = [body for body in (message.text_message, message.html_message) if body]
        if not bodies:
            return ""
        try:
            size = sum(draft.environment.encoded_length(body, draft.options.charset) for body in bodies)
        except MailConfigurationError:
            return ""
        return f"{size} bytes"


__all__ = ["ConsoleHandler"]
