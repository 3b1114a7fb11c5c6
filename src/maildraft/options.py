"""Delivery options shared by a draft and its handler.

``MailOptions`` replaces free-form attribute overriding with an explicit
allow-list: only the keys listed in :data:`OPTION_KEYS` are applied from a
configuration mapping. Legacy camelCase spellings (``DSN``,
``sendMultipart``, ``BCCBatchMode``, ``BCCBatchSize``) are accepted as
aliases of their snake_case fields.

Values are stored as given. Unusual ones (a priority outside 1..5, an
unknown line ending, ...) are logged at WARNING and left for handlers to
deal with.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from maildraft.config.exceptions import ConfigNotLoadedError
from maildraft.config.loader import get_config
from maildraft.formats import MailFormat
from maildraft.validators import (
    check_batch_size,
    check_flag,
    check_format,
    check_line_ending,
    check_priority,
    check_text_option,
    coerce_format,
)

log = logging.getLogger(__name__)


#: Accepted configuration keys mapped to ``MailOptions`` field names.
OPTION_KEYS: Mapping[str, str] = {
    "useragent": "useragent",
    "mailtype": "mailtype",
    "charset": "charset",
    "validate": "validate",
    "priority": "priority",
    "newline": "newline",
    "crlf": "crlf",
    "dsn": "dsn",
    "DSN": "dsn",
    "send_multipart": "send_multipart",
    "sendMultipart": "send_multipart",
    "bcc_batch_mode": "bcc_batch_mode",
    "BCCBatchMode": "bcc_batch_mode",
    "bcc_batch_size": "bcc_batch_size",
    "BCCBatchSize": "bcc_batch_size",
}


@dataclass(frozen=True, slots=True)
class MailOptions:
    """Delivery options for a message draft.

    Attributes:
        useragent: Value for the User-Agent / X-Mailer headers.
        mailtype: Default message format (a ``MailFormat`` when recognised).
        charset: Character set, upper-cased whenever it is a string.
        validate: Whether handlers should validate addresses before delivery.
        priority: X-Priority value (1 highest, 5 lowest).
        newline: Header line ending, ``"\\n"`` or ``"\\r\\n"``.
        crlf: Body line ending for quoted-printable content.
        dsn: Request delivery status notifications.
        send_multipart: Send HTML mail as multipart/alternative.
        bcc_batch_mode: Deliver BCC recipients in batches.
        bcc_batch_size: Maximum BCC recipients per batch.

    Examples:
        >>> MailOptions(charset="iso-8859-1").charset
        'ISO-8859-1'
        >>> MailOptions.from_mapping({"BCCBatchSize": 50, "unknown": 1}).bcc_batch_size
        50
    """

    useragent: str = "maildraft"
    mailtype: MailFormat = MailFormat.TEXT
    charset: str = "UTF-8"
    validate: bool = True
    priority: int = 3
    newline: str = "\n"
    crlf: str = "\n"
    dsn: bool = False
    send_multipart: bool = True
    bcc_batch_mode: bool = False
    bcc_batch_size: int = 200

    def __post_init__(self) -> None:
        """Normalize charset and mailtype, and warn about unusual values."""
        if isinstance(self.charset, str):
            object.__setattr__(self, "charset", self.charset.upper())
        object.__setattr__(self, "mailtype", coerce_format(self.mailtype))

        issues = [
            check_text_option(self.useragent, option="useragent"),
            check_text_option(self.charset, option="charset"),
            check_format(self.mailtype),
            check_priority(self.priority),
            check_line_ending(self.newline, option="newline"),
            check_line_ending(self.crlf, option="crlf"),
            check_batch_size(self.bcc_batch_size),
        ]
        for flag in ("validate", "dsn", "send_multipart", "bcc_batch_mode"):
            issues.append(check_flag(getattr(self, flag), option=flag))
        for issue in issues:
            if issue:
                log.warning("Unusual mail option: %s", issue)

    @staticmethod
    def _known_values(mapping: Mapping[str, Any]) -> dict[str, Any]:
        """Translate a raw mapping to field values, dropping unknown keys."""
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            field_name = OPTION_KEYS.get(key)
            if field_name is None:
                log.debug("Ignoring unknown mail option %r", key)
                continue
            values[field_name] = value
        return values

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None) -> MailOptions:
        """Build options from a configuration mapping.

        Keys outside :data:`OPTION_KEYS` are ignored; known keys are applied
        as given.
        """
        if not mapping:
            return cls()
        return cls(**cls._known_values(mapping))

    @classmethod
    def from_config(cls, **overrides: Any) -> MailOptions:
        """Build options from the ``mail.options`` config section.

        Falls back to defaults when no configuration is loaded or the
        section is absent. *overrides* are applied on top.

        Examples:
            >>> MailOptions.from_config(priority=1).priority  # doctest: +SKIP
            1
        """
        section = cls._load_config_section() or {}
        return cls.from_mapping({**section, **overrides})

    @staticmethod
    def _load_config_section() -> Mapping[str, Any] | None:
        try:
            config = get_config()
        except ConfigNotLoadedError:
            return None

        mail_section = config.get("mail")
        if not isinstance(mail_section, Mapping):
            return None
        options = mail_section.get("options")
        if not isinstance(options, Mapping):
            return None
        return dict(options)

    def with_overrides(self, mapping: Mapping[str, Any]) -> MailOptions:
        """Return a copy with the known keys of *mapping* applied."""
        return replace(self, **self._known_values(mapping))


__all__ = [
    "OPTION_KEYS",
    "MailFormat",
    "MailOptions",
]
