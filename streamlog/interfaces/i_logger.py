"""Leveled logger interface."""

from enum import IntEnum
from typing import Optional, Protocol


class Level(IntEnum):
    """Severity levels, ascending. DISABLED gates out everything."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    DISABLED = 5

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Convert a level name or number to a Level."""
        key = str(text).strip().lower()
        if key.isdigit():
            return cls(int(key))

        level = LEVEL_NAMES.get(key)
        if level is None:
            raise ValueError(f"unknown log level: {text!r}")
        return level


LEVEL_NAMES = {
    'debug': Level.DEBUG,
    'info': Level.INFO,
    'warn': Level.WARN,
    'warning': Level.WARN,
    'error': Level.ERROR,
    'fatal': Level.FATAL,
    'fatal_error': Level.FATAL,
    'disabled': Level.DISABLED,
    'off': Level.DISABLED,
}


class ILogger(Protocol):
    """Interface for leveled loggers."""

    def debug(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log at DEBUG."""
        ...

    def info(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log at INFO."""
        ...

    def warn(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log at WARN."""
        ...

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log at ERROR."""
        ...

    def fatal_error(
        self, message: str, cause: Optional[BaseException] = None
    ) -> None:
        """Log at FATAL."""
        ...

    def is_enabled(self, level: Level) -> bool:
        """Check the level gate."""
        ...

    def is_debug_enabled(self) -> bool:
        ...

    def is_info_enabled(self) -> bool:
        ...

    def is_warn_enabled(self) -> bool:
        ...

    def is_error_enabled(self) -> bool:
        ...

    def is_fatal_error_enabled(self) -> bool:
        ...

    def get_threshold(self) -> Level:
        """Current threshold."""
        ...

    def set_threshold(self, threshold: Level) -> None:
        """Change the threshold."""
        ...

    def get_child_logger(self, name: str) -> "ILogger":
        """Logger for a named component."""
        ...

    def close(self) -> None:
        """Finalize the output stream."""
        ...


class ILogSink(Protocol):
    """Interface for hosts that name levels with strings."""

    def log(self, level: str, message: str) -> None:
        """Write log entry at the named level ("info", "warn", ...)."""
        ...
