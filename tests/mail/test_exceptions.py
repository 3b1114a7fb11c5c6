"""Tests for the maildraft exception hierarchy."""

from __future__ import annotations

import pytest

from maildraft.config.exceptions import ConfigError, MailDraftError
from maildraft.exceptions import MailConfigurationError, MailError, MailHandlerError


class TestHierarchy:
    """Inheritance relationships."""

    def test_mail_error_is_maildraft_error(self) -> None:
        """MailError inherits from MailDraftError."""
        assert issubclass(MailError, MailDraftError)

    def test_configuration_error_is_value_error(self) -> None:
        """MailConfigurationError is both a MailError and a ValueError."""
        assert issubclass(MailConfigurationError, MailError)
        assert issubclass(MailConfigurationError, ValueError)

    def test_handler_error_is_mail_error(self) -> None:
        """MailHandlerError inherits from MailError."""
        assert issubclass(MailHandlerError, MailError)

    def test_config_error_is_not_mail_error(self) -> None:
        """Configuration loading errors form a separate branch."""
        assert issubclass(ConfigError, MailDraftError)
        assert not issubclass(ConfigError, MailError)


class TestAttributes:
    """Context carried by exceptions."""

    def test_configuration_error_option(self) -> None:
        """Store the option name."""
        exc = MailConfigurationError("Unknown charset: 'X'", option="charset")
        assert exc.option == "charset"
        assert str(exc) == "Unknown charset: 'X'"

    def test_handler_error_handler(self) -> None:
        """Store the handler name and stay catchable as MailError."""
        with pytest.raises(MailError) as excinfo:
            raise MailHandlerError("boom", handler="SMTPHandler")
        assert excinfo.value.handler == "SMTPHandler"

    def test_defaults(self) -> None:
        """Context attributes default to None."""
        assert MailConfigurationError("x").option is None
        assert MailHandlerError("x").handler is None
