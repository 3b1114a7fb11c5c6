"""Host capabilities detected once per process.

Handlers need a couple of facts about the running host (the domain to use
in Message-ID headers, how payload sizes are measured). They are gathered
into an explicit :class:`MailEnvironment` object that drafts carry and pass
on, instead of module-level globals.
"""

from __future__ import annotations

import codecs
import functools
import logging
import socket
from dataclasses import dataclass

from maildraft.exceptions import MailConfigurationError

log = logging.getLogger(__name__)

_FALLBACK_HOSTNAME = "localhost.localdomain"


@dataclass(frozen=True, slots=True)
class MailEnvironment:
    """Capabilities of the host composing and sending mail.

    Attributes:
        hostname: Fully qualified host name, used for Message-ID domains.
        byte_semantics: Whether payload lengths are measured on encoded bytes.
            Size limits are always computed on bytes; this records the
            capability instead of probing for it at every call.

    Examples:
        >>> env = MailEnvironment(hostname="mail.example.com")
        >>> env.encoded_length("héllo", "UTF-8")
        6
    """

    hostname: str = _FALLBACK_HOSTNAME
    byte_semantics: bool = True

    @classmethod
    def detect(cls) -> MailEnvironment:
        """Return the environment of the current process.

        Detection runs once; later calls return the same instance. Drafts only
        call this when their environment is first needed.
        """
        return _detect_environment()

    def encoded_length(self, text: str, charset: str) -> int:
        """Return the length of *text* once encoded in *charset*.

        Raises:
            MailConfigurationError: If *charset* is not a known codec.
        """
        try:
            codec = codecs.lookup(charset)
        except (LookupError, TypeError) as e:
            raise MailConfigurationError(f"Unknown charset: {charset!r}", option="charset") from e
        if not self.byte_semantics:
            return len(text)
        return len(codec.encode(text)[0])


@functools.lru_cache(maxsize=1)
def _detect_environment() -> MailEnvironment:
    try:
        hostname = socket.getfqdn() or _FALLBACK_HOSTNAME
    except OSError:
        hostname = _FALLBACK_HOSTNAME
    log.debug("Detected mail environment (hostname=%s)", hostname)
    return MailEnvironment(hostname=hostname)


__all__ = ["MailEnvironment"]
