"""Preview drafts on the terminal using :class:`maildraft.ConsoleHandler`."""

from __future__ import annotations

from maildraft import ConsoleHandler, MailHandlerError, MessageDraft
from maildraft.logging import LogManager


def preview_newsletter() -> None:
    """Compose a message with headers and attachment metadata and print it."""
    logger = LogManager(name="console_preview", preset="dev")

    draft = MessageDraft({"mailtype": "html", "priority": 2}, handler=ConsoleHandler())
    (
        draft.sender("newsletter@example.com", "Example News")
        .reply_to("support@example.com")
        .to("reader@example.com")
        .subject("Spring edition")
        .message_text("Our spring edition is out.")
        .message_html("<h1>Spring edition</h1><p>Our spring edition is out.</p>")
        .set_header("X-Campaign", "spring")
        .attach("reports/spring.pdf", rename="spring-edition.pdf", mime="application/pdf")
    )
    logger.debug("Draft composed", to="reader@example.com", attachments=len(draft.attachments))

    try:
        draft.send()
    except MailHandlerError as e:
        logger.traceback(e)
        raise
    logger.success("Preview rendered", handler="ConsoleHandler")


if __name__ == "__main__":  # pragma: no cover - manual example
    preview_newsletter()
