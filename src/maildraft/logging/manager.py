"""Rich-backed logger with presets and structured context.

``LogManager`` is a :class:`logging.Logger` subclass. The logger itself
accepts every level down to ``TRACE``; handlers do the filtering. Output is
driven by a small configuration mapping::

    {
        "output": "console" | "file" | "both",
        "console": {"level": "INFO", "show_path": False},
        "file": {"log_path": ".", "log_dir": "logs", "log_name": "maildraft.log", "level": "DEBUG"},
        "icons": {"show": True},
    }

Resolution order: built-in fallback, ``logger.defaults`` from the loaded
configuration, the selected preset, then the explicit ``config`` argument.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from box import Box
from rich.console import Console
from rich.logging import RichHandler

from maildraft.config.exceptions import ConfigNotLoadedError
from maildraft.config.loader import get_config

TRACE_LEVEL = 5
SUCCESS_LEVEL = 25

logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

FALLBACK_DEFAULTS: dict[str, Any] = {
    "output": "console",
    "console": {"level": "INFO", "show_path": False},
    "file": {
        "log_path": ".",
        "log_dir": "logs",
        "log_name": "maildraft.log",
        "level": "DEBUG",
        "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    },
    "icons": {
        "show": True,
        "TRACE": "·",
        "DEBUG": "›",
        "INFO": "i",
        "SUCCESS": "✓",
        "WARNING": "!",
        "ERROR": "✗",
        "CRITICAL": "‼",
    },
}

FALLBACK_PRESETS: dict[str, dict[str, Any]] = {
    "dev": {"output": "console", "console": {"level": "DEBUG", "show_path": True}},
    "prod": {"output": "file", "file": {"level": "INFO"}, "icons": {"show": False}},
    "debug": {"output": "both", "console": {"level": "TRACE"}, "file": {"level": "TRACE"}},
}

# Keyword arguments consumed by logging.Logger._log itself
_RESERVED_KWARGS = frozenset({"exc_info", "extra", "stack_info", "stacklevel"})


def _load_global_section() -> Mapping[str, Any]:
    """Return the ``logger`` section of the loaded config, or an empty mapping."""
    try:
        config = get_config()
    except (ConfigNotLoadedError, FileNotFoundError):
        return {}
    section = config.get("logger") if config is not None else None
    return section if isinstance(section, Mapping) else {}


class LogManager(logging.Logger):
    """Logger with rich console output, file output and presets.

    Args:
        name: Logger name.
        preset: One of ``dev``, ``prod``, ``debug`` (unknown presets are ignored).
        config: Explicit overrides applied last.

    Examples:
        >>> log = LogManager(name="mailer", preset="dev")
        >>> log.success("Draft sent", recipient="user@example.com")  # doctest: +SKIP
    """

    def __init__(
        self,
        name: str = "maildraft",
        *,
        preset: str | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(name, level=TRACE_LEVEL)
        self._config = self._resolve_config(preset, config)
        self._setup_handlers()

    @staticmethod
    def _resolve_config(preset: str | None, config: Mapping[str, Any] | None) -> Box:
        resolved = Box(copy.deepcopy(FALLBACK_DEFAULTS), default_box=True)
        global_section = _load_global_section()

        defaults = global_section.get("defaults")
        if isinstance(defaults, Mapping):
            resolved.merge_update(Box(defaults))

        if preset:
            presets = dict(FALLBACK_PRESETS)
            configured = global_section.get("presets")
            if isinstance(configured, Mapping):
                presets.update({key: dict(value) for key, value in configured.items()})
            if preset in presets:
                resolved.merge_update(Box(presets[preset]))

        icons = global_section.get("icons")
        if isinstance(icons, Mapping):
            resolved.icons.merge_update(Box(icons))

        if config:
            resolved.merge_update(Box(config))
        return resolved

    def _setup_handlers(self) -> None:
        output = self._config.output
        if output in ("console", "both"):
            console_cfg = self._config.console
            handler = RichHandler(
                console=Console(stderr=True),
                show_path=bool(console_cfg.get("show_path", False)),
                rich_tracebacks=True,
                markup=False,
            )
            handler.setLevel(_level_value(console_cfg.get("level", "INFO")))
            self.addHandler(handler)

        if output in ("file", "both"):
            file_cfg = self._config.file
            log_dir = Path(file_cfg.log_path) / file_cfg.log_dir
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / file_cfg.log_name, encoding="utf-8")
            file_handler.setLevel(_level_value(file_cfg.get("level", "DEBUG")))
            file_handler.setFormatter(logging.Formatter(file_cfg.format))
            self.addHandler(file_handler)

    def _format_with_icon(self, level_name: str, message: str) -> str:
        icons = self._config.icons
        if not icons.get("show", False):
            return message
        icon = icons.get(level_name)
        if not icon:
            return message
        return f"{icon} {message}"

    def _log(  # type: ignore[override]
        self,
        level: int,
        msg: object,
        args: Any,
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        **context: Any,
    ) -> None:
        message = self._format_with_icon(logging.getLevelName(level), str(msg))
        if context:
            rendered = " ".join(f"{key}={value!r}" for key, value in context.items() if key not in _RESERVED_KWARGS)
            message = f"{message} | {rendered}"
        super()._log(level, message, args, exc_info, extra, stack_info, stacklevel + 1)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)

    def success(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at SUCCESS level."""
        if self.isEnabledFor(SUCCESS_LEVEL):
            self._log(SUCCESS_LEVEL, msg, args, **kwargs)

    def traceback(self, exc: BaseException, msg: str | None = None) -> None:
        """Log *exc* at ERROR level together with its traceback."""
        self._log(logging.ERROR, msg or f"{type(exc).__name__}: {exc}", (), exc_info=exc)


def _level_value(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


__all__ = [
    "FALLBACK_DEFAULTS",
    "FALLBACK_PRESETS",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
