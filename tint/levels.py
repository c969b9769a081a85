from enum import Enum
from typing import Optional


class LevelKind(str, Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def color(self) -> str:
        return LEVEL_COLORS[self]


LEVEL_COLORS = {
    LevelKind.ERROR: "\x1b[91m",  # red
    LevelKind.WARN: "\x1b[93m",   # yellow
    LevelKind.INFO: "\x1b[92m",   # green
    LevelKind.DEBUG: "\x1b[94m",  # blue
    LevelKind.TRACE: "\x1b[95m",  # purple
}


def classify_level(token: str) -> Optional[LevelKind]:
    """
    Map a raw level token to its LevelKind.

    Surrounding whitespace and casing are ignored.
    Anything outside the five known names is unrecognized (None).
    """
    normalized = token.strip().lower()
    try:
        return LevelKind(normalized)
    except ValueError:
        return None
