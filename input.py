import io
import sys
from typing import Iterator, Optional, TextIO


class MissingInputError(Exception):
    pass


def open_input(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> TextIO:
    """
    Pick the stream to colorize.

    A named file wins. Without one, stdin is used, but only when
    something is piped into it: an interactive terminal means the
    user forgot the filename.

    Only "\\n" splits lines; a "\\r" before it is dropped by read_lines.
    Bytes that are not UTF-8 raise UnicodeDecodeError while reading.
    """
    if path is not None:
        return open(path, encoding="utf-8", newline="\n")

    if stdin is None:
        stdin = sys.stdin

    if stdin.isatty():
        raise MissingInputError("Missing filename")

    buffer = getattr(stdin, "buffer", None)
    if buffer is None:
        return stdin

    return io.TextIOWrapper(buffer, encoding="utf-8", newline="\n")


def read_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line
