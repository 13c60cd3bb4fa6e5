"""Colorized line logger writing to a caller-supplied stream."""

import io
import sys
import traceback
from typing import Optional
from . import ansi
from .abstract_logger import AbstractLogger, DEFAULT_NAME
from .adapters.fixed_stream_provider import FixedStreamProvider
from .interfaces import IOutputStream, IStreamProvider, Level


DEBUG = "[DEBUG] "
INFO = "[INFO] "
WARNING = "[WARNING] "
ERROR = "[ERROR] "
FATAL_ERROR = "[FATAL] "


class PrintStreamLogger(AbstractLogger):
    """Logs to the stream handed out by a provider.

    Each record is written as color-on, prefix, message, newline and
    color reset, followed by the cause's traceback if one is given.
    The stream is looked up again for every record so the host can
    redirect output without rebuilding the logger. Records are not
    flushed and no lock is held while writing.
    """

    def __init__(
        self,
        provider: IStreamProvider,
        threshold: Level = Level.INFO,
        name: str = DEFAULT_NAME
    ):
        if provider is None:
            raise ValueError("output stream provider missing")
        super().__init__(threshold, name)
        self.provider = provider
        self.encoding = "utf-8"

        self.debug_color = ansi.sgr(ansi.ATTR_DIM, ansi.FG_BLUE)
        self.info_color = ansi.sgr(ansi.ATTR_DIM, ansi.FG_GREEN)
        self.warn_color = ansi.sgr(ansi.ATTR_DIM, ansi.FG_YELLOW)
        self.error_color = ansi.sgr(ansi.ATTR_DIM, ansi.FG_RED)
        self.fatal_error_color = ansi.sgr(ansi.ATTR_DIM, ansi.FG_RED)

    @classmethod
    def from_stream(
        cls,
        out: IOutputStream,
        threshold: Level = Level.INFO,
        name: str = DEFAULT_NAME
    ) -> "PrintStreamLogger":
        """Build a logger that always writes to out."""
        if out is None:
            raise ValueError("output stream missing")
        return cls(FixedStreamProvider(out), threshold, name)

    def set_stream(self, out: IOutputStream) -> None:
        """Replace the provider with one yielding out."""
        if out is None:
            raise ValueError("output stream missing")
        self.provider = FixedStreamProvider(out)

    def _get_stream(self) -> IOutputStream:
        """Current stream from the provider (early failure on None)."""
        out = self.provider.get_stream()
        if out is None:
            raise RuntimeError("output stream provider returned no stream")
        return out

    def _print(self, out: IOutputStream, text: str) -> None:
        if _is_binary(out):
            out.write(text.encode(self.encoding))
        else:
            out.write(text)

    def _print_record(
        self,
        color: str,
        prefix: str,
        message: str,
        cause: Optional[BaseException]
    ) -> None:
        out = self._get_stream()
        self._print(out, color)
        self._print(out, prefix)
        self._print(out, f"{message}\n")
        self._print(out, ansi.END_COLOR)
        if cause is not None:
            trace = traceback.format_exception(
                type(cause), cause, cause.__traceback__
            )
            self._print(out, "".join(trace))

    def debug(self, message: str, cause: Optional[BaseException] = None) -> None:
        if self.is_debug_enabled():
            self._print_record(self.debug_color, DEBUG, message, cause)

    def info(self, message: str, cause: Optional[BaseException] = None) -> None:
        if self.is_info_enabled():
            self._print_record(self.info_color, INFO, message, cause)

    def warn(self, message: str, cause: Optional[BaseException] = None) -> None:
        if self.is_warn_enabled():
            self._print_record(self.warn_color, WARNING, message, cause)

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        if self.is_error_enabled():
            self._print_record(self.error_color, ERROR, message, cause)

    def fatal_error(
        self, message: str, cause: Optional[BaseException] = None
    ) -> None:
        if self.is_fatal_error_enabled():
            self._print_record(
                self.fatal_error_color, FATAL_ERROR, message, cause
            )

    def close(self) -> None:
        """Flush standard streams, close anything else."""
        out = self._get_stream()

        if any(out is std for std in _standard_streams()):
            out.flush()
        else:
            out.close()

    def get_child_logger(self, name: str) -> "PrintStreamLogger":
        """Child loggers share everything with the parent."""
        return self


def _is_binary(out: IOutputStream) -> bool:
    """Bytes sinks: io binary classes, or wrappers opened in "b" mode."""
    if isinstance(out, io.TextIOBase):
        return False
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # tempfile wrappers are not io subclasses but expose the file mode
    mode = getattr(out, "mode", "")
    return isinstance(mode, str) and "b" in mode


def _standard_streams() -> tuple:
    return (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
