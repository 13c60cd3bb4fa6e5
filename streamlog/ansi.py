"""ANSI SGR color sequences."""

ATTR_DIM = 2
FG_RED = 31
FG_GREEN = 32
FG_YELLOW = 33
FG_BLUE = 34
FG_MAGENTA = 35
FG_CYAN = 36
FG_WHITE = 37

CSI = "\x1b["
SUFFIX = "m"
SEPARATOR = ";"

# Empty parameter list: reset all attributes
END_COLOR = CSI + SUFFIX


def sgr(*params: int) -> str:
    """Build an SGR escape sequence, e.g. sgr(2, 31) -> ESC[2;31m."""
    return CSI + SEPARATOR.join(str(p) for p in params) + SUFFIX
