from typing import List, Optional, Tuple

from .levels import classify_level
from .types import GeneralFormat, LineFormat


MIN_LINE_LENGTH = 4
REQUIRED_RUNS = 3


def find_run_starts(line: str, limit: int = REQUIRED_RUNS) -> List[int]:
    """
    Offsets where each run of consecutive spaces begins.

    Scanning stops once `limit` run starts are found, so the
    message tail is never walked.
    """
    starts: List[int] = []
    prev_was_space = False

    for i, c in enumerate(line):
        if c == " ":
            if not prev_was_space:
                starts.append(i)
                if len(starts) >= limit:
                    break
            prev_was_space = True
        else:
            prev_was_space = False

    return starts


def learn(line: str) -> Optional[Tuple[LineFormat, GeneralFormat]]:
    """
    Infer the layout of a line with no prior knowledge.

    Expected shape:
      2025-08-28T04:57:18.797136Z INFO  crate::path::file: I am the log message

    The first three space-run starts (s0, s1, s2) close the timestamp,
    level and source fields. Each field keeps one trailing separator,
    which is what the "+ 1" below is for.

    Returns None if the line cannot be learned from. Returning a
    format does not guarantee a correct parse.
    """
    if len(line) < MIN_LINE_LENGTH:
        return None

    starts = find_run_starts(line)
    if len(starts) < REQUIRED_RUNS:
        return None

    s0, s1, s2 = starts

    level = classify_level(line[s0 + 1:s1])
    if level is None:
        return None

    line_format = LineFormat(
        level=level,
        ts_start=0,
        ts_end=s0 + 1,
        level_start=s0 + 1,
        level_end=s1 + 1,
        source_start=s1 + 1,
        source_end=s2 + 1,
    )

    return line_format, line_format.general()
