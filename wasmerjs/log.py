"""
Logging setup for the wasmer-js tool.

Diagnostics go to stderr through the standard logging module; command output
goes to stdout through the writers in wasmerjs.output, so the two never mix.

Example:
    lg = LoggingBuilder("wasmerjs").with_level("debug").build()
    lg.debug("dispatching", extra={"command": "run"})
"""

import logging
import sys
from typing import Any, Self, TextIO

_DISABLED = "false"


class ColorManager:
    """ANSI color codes used for level names."""

    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    RESET = "\x1b[0m"

    COLORS: dict[int, str] = {
        logging.DEBUG: GREEN,
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str | None:
        return ColorManager.COLORS.get(level)


class LogFormatter(logging.Formatter):
    """
    Formats records as ``[LEVEL] name: message [key:value]``.

    Values passed through ``extra=`` that are not standard record attributes
    are appended as ``[key:value]`` pairs, sorted by key.
    """

    _RESERVED = frozenset(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    ) | {"message", "asctime"}

    def __init__(self, colors: bool = True) -> None:
        super().__init__()
        self._colors = colors

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.lower()
        color = ColorManager.get_color_for_level(record.levelno)
        if self._colors and color:
            level = f"{color}{level}{ColorManager.RESET}"

        line = f"[{level}] {record.name}: {record.getMessage()}"
        extra = self._format_extra(record)
        if extra:
            line = f"{line} {extra}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _format_extra(self, record: logging.LogRecord) -> str:
        fields = {
            k: v for k, v in record.__dict__.items() if k not in self._RESERVED
        }
        return " ".join(f"[{k}:{fields[k]}]" for k in sorted(fields))


def _resolve_level(level: Any) -> int | None:
    """Map a level setting to a logging level, None meaning disabled."""
    if level is False or (isinstance(level, str) and level.lower() == _DISABLED):
        return None
    if isinstance(level, bool):
        return logging.INFO
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        raise ValueError(f"invalid log level: {level!r}")
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"invalid log level: {level}")
    return resolved


class LoggingBuilder:
    """
    Fluent builder for the tool's loggers.

    Building the same name twice reconfigures the existing logger instead of
    stacking handlers on it.
    """

    def __init__(self, name: str):
        self._name = name
        self._level: str | int | bool = "warning"
        self._colors = True
        self._stream: TextIO | None = None

    def with_level(self, level: str | int | bool) -> Self:
        """
        Set the log level.

        Args:
            level: Level name, numeric value, or False/"false" to disable logging
        """
        self._level = level
        return self

    def with_colors(self, enabled: bool = True) -> Self:
        self._colors = enabled
        return self

    def with_stream(self, stream: TextIO) -> Self:
        self._stream = stream
        return self

    def with_config(self, config: dict[str, Any]) -> Self:
        """
        Set several options at once.

        Args:
            config: Dictionary with optional "level" and "colors" keys
        """
        if "level" in config and config["level"] is not None:
            self.with_level(config["level"])
        if "colors" in config and config["colors"] is not None:
            self.with_colors(bool(config["colors"]))
        return self

    def build(self) -> logging.Logger:
        """
        Build and return the configured logger.

        Raises:
            ValueError: If the level name is not a known logging level
        """
        level = _resolve_level(self._level)
        logger = logging.getLogger(self._name)
        logger.handlers.clear()
        logger.propagate = False

        if level is None:
            logger.disabled = True
            logger.addHandler(logging.NullHandler())
            return logger

        logger.disabled = False
        logger.setLevel(level)
        stream = self._stream if self._stream is not None else sys.stderr
        colors = self._colors and _is_tty(stream)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LogFormatter(colors=colors))
        logger.addHandler(handler)
        return logger


def _is_tty(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the tool's logger, or a child of it."""
    if not name:
        return logging.getLogger("wasmerjs")
    return logging.getLogger(f"wasmerjs.{name}")
