"""Adapter implementations for streamlog."""

from .fixed_stream_provider import FixedStreamProvider, StandardStreamProvider
from .log_sink_adapter import LogSinkAdapter, LEVEL_METHODS
from .logging_handler_adapter import LoggingHandlerAdapter

__all__ = [
    'FixedStreamProvider',
    'StandardStreamProvider',
    'LogSinkAdapter',
    'LEVEL_METHODS',
    'LoggingHandlerAdapter',
]
