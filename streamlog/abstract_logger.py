"""Level gate shared by leveled loggers."""

from abc import ABC, abstractmethod
from typing import Optional
from .interfaces import ILogger, Level


DEFAULT_NAME = "streamlog"


class AbstractLogger(ABC):
    """Holds the threshold and name; subclasses emit records."""

    def __init__(self, threshold: Level = Level.INFO, name: str = DEFAULT_NAME):
        self.set_threshold(threshold)
        self.name = name

    def get_name(self) -> str:
        return self.name

    def get_threshold(self) -> Level:
        return self.threshold

    def set_threshold(self, threshold: Level) -> None:
        """Change the threshold (Level or its int value)."""
        # bool is an int subclass but never a meaningful level
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise ValueError(f"invalid threshold: {threshold!r}")
        self.threshold = Level(threshold)

    def is_enabled(self, level: Level) -> bool:
        """True if a record at level passes the gate."""
        return level >= self.threshold

    def is_debug_enabled(self) -> bool:
        return self.is_enabled(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled(Level.ERROR)

    def is_fatal_error_enabled(self) -> bool:
        return self.is_enabled(Level.FATAL)

    @abstractmethod
    def debug(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def info(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def warn(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def fatal_error(
        self, message: str, cause: Optional[BaseException] = None
    ) -> None:
        ...

    @abstractmethod
    def get_child_logger(self, name: str) -> ILogger:
        ...
