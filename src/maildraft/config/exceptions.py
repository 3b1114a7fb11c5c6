"""Exceptions raised by the maildraft.config module.

Exception hierarchy::

    MailDraftError (root of every maildraft exception)
        ConfigError
            ConfigFileNotFoundError (also FileNotFoundError)
            ConfigFormatError (also ValueError)
            ConfigNotLoadedError
"""

from __future__ import annotations


class MailDraftError(Exception):
    """Base exception for all maildraft errors."""


class ConfigError(MailDraftError):
    """Base exception for configuration loading errors."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """The requested configuration file does not exist."""


class ConfigFormatError(ConfigError, ValueError):
    """The configuration file could not be parsed or has the wrong shape."""


class ConfigNotLoadedError(ConfigError):
    """Configuration was requested before ``load_config`` was called."""


__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MailDraftError",
]
