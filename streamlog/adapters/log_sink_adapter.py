"""Level-string log sink adapter."""

from ..interfaces import ILogger, ILogSink


# Table-driven dispatch (suckless pattern)
LEVEL_METHODS = {
    'debug': 'debug',
    'info': 'info',
    'warn': 'warn',
    'warning': 'warn',
    'error': 'error',
    'fatal': 'fatal_error',
}


class LogSinkAdapter(ILogSink):
    """Adapter exposing a leveled logger as an ILogSink."""

    def __init__(self, logger: ILogger):
        self.logger = logger

    def log(self, level: str, message: str) -> None:
        """Write log entry at the named level."""
        method = LEVEL_METHODS.get(level.lower())
        if method is None:
            raise ValueError(f"unknown log level: {level!r}")

        getattr(self.logger, method)(message)
