import re

from .types import LineFormat


GREY = "\x1b[90m"
RESET = "\x1b[0m"

FAILURE_PREFIX = "FAILED TO PARSE LINE: "

ANSI_SGR = re.compile(r"\x1b\[[0-9;]*m")


def colorize(line: str, fmt: LineFormat) -> str:
    """
    Wrap timestamp and source in grey, the level in its own color,
    and reset before the message. The rest of the line is untouched.

    Offsets in `fmt` must be valid for `line`.
    """
    return "".join(
        (
            GREY,
            line[fmt.ts_start:fmt.ts_end],
            fmt.level.color,
            line[fmt.level_start:fmt.level_end],
            GREY,
            line[fmt.source_start:fmt.source_end],
            RESET,
            line[fmt.source_end:],
        )
    )


def failure_line(line: str) -> str:
    return FAILURE_PREFIX + line


def strip_ansi(text: str) -> str:
    return ANSI_SGR.sub("", text)
