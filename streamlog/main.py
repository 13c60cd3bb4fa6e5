"""streamlog - Main Entry Point.

Reads lines from stdin and logs each one through the colorized logger.
A leading level word ("warn: disk almost full", "[ERROR] failed")
selects the level; anything else is logged at INFO.
"""

import re
import sys
from typing import Optional, TextIO
from .config import LOG_LEVEL, LOG_STREAM, LOG_NAME
from .adapters import (
    LogSinkAdapter,
    LEVEL_METHODS,
    StandardStreamProvider
)
from .interfaces import Level
from .print_stream_logger import PrintStreamLogger


LINE_PATTERN = re.compile(
    r"^\s*\[?(" + "|".join(LEVEL_METHODS) + r")\]?(?::\s*|\s+|$)(.*)$",
    re.IGNORECASE
)


def parse_line(line: str) -> tuple[str, str]:
    """Split a raw line into (level, message)."""
    line = line.rstrip("\r\n")
    match = LINE_PATTERN.match(line)
    if not match:
        return "info", line
    return match.group(1).lower(), match.group(2)


def main(stdin: Optional[TextIO] = None) -> int:
    """Front-end initialization and read loop."""
    # Validate config (early return)
    try:
        threshold = Level.parse(LOG_LEVEL)
        provider = StandardStreamProvider(LOG_STREAM)
    except ValueError as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return 1

    logger = PrintStreamLogger(provider, threshold, LOG_NAME)
    sink = LogSinkAdapter(logger)

    logger.debug(f"Logging to {LOG_STREAM} at {threshold.name}")

    for line in stdin or sys.stdin:
        level, message = parse_line(line)
        sink.log(level, message)

    logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
