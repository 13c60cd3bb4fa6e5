"""Leveled, ANSI-colorized line logger."""

from .abstract_logger import AbstractLogger, DEFAULT_NAME
from .print_stream_logger import PrintStreamLogger
from .interfaces import (
    ILogger,
    ILogSink,
    IOutputStream,
    IStreamProvider,
    Level
)
from .adapters import (
    FixedStreamProvider,
    StandardStreamProvider,
    LogSinkAdapter,
    LoggingHandlerAdapter
)

__all__ = [
    'AbstractLogger',
    'DEFAULT_NAME',
    'PrintStreamLogger',
    'ILogger',
    'ILogSink',
    'IOutputStream',
    'IStreamProvider',
    'Level',
    'FixedStreamProvider',
    'StandardStreamProvider',
    'LogSinkAdapter',
    'LoggingHandlerAdapter',
]
