import contextlib
import logging
import subprocess
import sys
from typing import List, Optional, Sequence, TextIO, Union


logger = logging.getLogger(__name__)

# less: pass ANSI color sequences through as-is
RAW_CONTROL_FLAG = "-R"


class StdoutSink:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> "StdoutSink":
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.stream.flush()

    def write_line(self, text: str):
        self.stream.write(text + "\n")
        self.stream.flush()


class PagerSink:
    """
    Feeds lines into a pager's stdin, one flushed line at a time so
    live input (tail -f) shows up as it arrives.

    Leaving the context always closes the pipe BEFORE waiting on the
    pager, otherwise the pager never sees EOF and the wait hangs.
    """

    def __init__(self, command: Sequence[str]):
        self.command: List[str] = list(command)
        self.process: Optional[subprocess.Popen] = None

    def __enter__(self) -> "PagerSink":
        logger.debug("starting pager: %s", self.command)
        self.process = subprocess.Popen(
            self.command,
            stdin=subprocess.PIPE,
            encoding="utf-8",
        )
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            if exc_type is None:
                self.process.stdin.close()
            else:
                # the original error is the one worth reporting
                with contextlib.suppress(BrokenPipeError):
                    self.process.stdin.close()
        finally:
            returncode = self.process.wait()
            logger.debug("pager exited with status %d", returncode)

    def write_line(self, text: str):
        self.process.stdin.write(text + "\n")
        self.process.stdin.flush()


Sink = Union[StdoutSink, PagerSink]


def open_output(
    pipe: bool,
    pager: str = "less",
    pager_args: Sequence[str] = (),
) -> Sink:
    if pipe:
        return StdoutSink()
    return PagerSink([pager, RAW_CONTROL_FLAG, *pager_args])
