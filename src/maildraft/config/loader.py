"""YAML configuration loader.

Configuration lives in ``maildraft.conf.yml`` (current working directory by
default) and is exposed as a :class:`box.Box` so sections can be read with
attribute access::

    mail:
      options:
        charset: utf-8
        priority: 2
    logger:
      defaults:
        output: console

The loaded configuration is cached until :func:`clear_config` is called.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from box import Box

from maildraft.config.exceptions import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
)

log = logging.getLogger(__name__)

#: Default configuration filename searched in the working directory.
DEFAULT_CONFIG_FILENAME = "maildraft.conf.yml"

_config: Box | None = None


def load_from_file(path: str | Path) -> Box:
    """Parse a YAML configuration file into a Box.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration (empty Box for an empty file).

    Raises:
        ConfigFileNotFoundError: If *path* does not exist.
        ConfigFormatError: If the file is not valid YAML or not a mapping.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigFileNotFoundError(f"Config file not found: {file_path}")

    try:
        with file_path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as e:
        raise ConfigFormatError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigFormatError(f"Config root in {file_path} must be a mapping, got {type(data).__name__}")

    log.debug("Loaded configuration from %s", file_path)
    return Box(data, default_box=True)


def load_config(filename: str | Path | None = None) -> Box:
    """Load and cache the configuration.

    Args:
        filename: Explicit path; defaults to ``maildraft.conf.yml`` in the
            current working directory.

    Returns:
        The loaded configuration.

    Examples:
        >>> config = load_config("maildraft.conf.yml")  # doctest: +SKIP
        >>> config.mail.options.charset  # doctest: +SKIP
        'utf-8'
    """
    global _config  # pylint: disable=global-statement
    path = Path(filename) if filename is not None else Path.cwd() / DEFAULT_CONFIG_FILENAME
    _config = load_from_file(path)
    return _config


def get_config() -> Box:
    """Return the cached configuration.

    Raises:
        ConfigNotLoadedError: If :func:`load_config` has not been called.
    """
    if _config is None:
        raise ConfigNotLoadedError("Configuration not loaded; call load_config() first")
    return _config


def clear_config() -> None:
    """Forget the cached configuration."""
    global _config  # pylint: disable=global-statement
    _config = None


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_file",
]
