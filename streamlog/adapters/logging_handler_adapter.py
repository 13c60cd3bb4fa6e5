"""Bridge from the standard logging module."""

import logging
from ..interfaces import ILogger


class LoggingHandlerAdapter(logging.Handler):
    """logging.Handler that forwards records to a leveled logger.

    Threshold gating is left to the wrapped logger; the handler's own
    level is NOTSET unless the host sets one.
    """

    def __init__(self, logger: ILogger):
        super().__init__()
        self.logger = logger

    def _method_for(self, levelno: int):
        if levelno < logging.INFO:
            return self.logger.debug
        if levelno < logging.WARNING:
            return self.logger.info
        if levelno < logging.ERROR:
            return self.logger.warn
        if levelno < logging.CRITICAL:
            return self.logger.error
        return self.logger.fatal_error

    def emit(self, record: logging.LogRecord) -> None:
        try:
            cause = record.exc_info[1] if record.exc_info else None
            self._method_for(record.levelno)(record.getMessage(), cause)
        except Exception:
            self.handleError(record)
