"""Interface definitions for streamlog adapters."""

from .i_logger import ILogger, ILogSink, Level, LEVEL_NAMES
from .i_stream_provider import IOutputStream, IStreamProvider

__all__ = [
    'ILogger',
    'ILogSink',
    'Level',
    'LEVEL_NAMES',
    'IOutputStream',
    'IStreamProvider',
]
