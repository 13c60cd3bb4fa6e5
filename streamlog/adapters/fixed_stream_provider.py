"""Stream provider adapters."""

import sys
from ..interfaces import IOutputStream


class FixedStreamProvider:
    """Provider that always yields the same stream."""

    def __init__(self, out: IOutputStream):
        self.out = out

    def get_stream(self) -> IOutputStream:
        return self.out


class StandardStreamProvider:
    """Provider that looks up sys.stdout or sys.stderr on every call.

    Follows redirections the host makes after the logger is built,
    e.g. contextlib.redirect_stdout or pytest's capture.
    """

    STREAMS = ('stdout', 'stderr')

    def __init__(self, stream_name: str = "stdout"):
        # Validate input (early return)
        if stream_name not in self.STREAMS:
            raise ValueError(f"unknown standard stream: {stream_name!r}")
        self.stream_name = stream_name

    def get_stream(self) -> IOutputStream:
        return getattr(sys, self.stream_name)
