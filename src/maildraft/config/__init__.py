"""Configuration loading for maildraft."""

from maildraft.config.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
    MailDraftError,
)
from maildraft.config.loader import (
    DEFAULT_CONFIG_FILENAME,
    clear_config,
    get_config,
    load_config,
    load_from_file,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MailDraftError",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_file",
]
