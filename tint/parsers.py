from typing import Optional

from .levels import classify_level
from .types import GeneralFormat, LineFormat


def find_source_end(line: str, start: int) -> Optional[int]:
    """
    End of the source field that begins at `start`.

    Spaces left over from the level padding are skipped, then the
    first space after the source token closes the field. That space
    belongs to the source, same as when the layout was learned.

    Returns None when the source is not followed by a space, so a line
    that ends right after its source ("... INFO  crate::path") fails
    rather than getting an empty source.
    """
    i = start
    while i < len(line) and line[i] == " ":
        i += 1

    end = line.find(" ", i)
    if end == -1:
        return None

    return end + 1


def apply(line: str, fmt: GeneralFormat) -> Optional[LineFormat]:
    """
    Parse a line using a previously learned GeneralFormat.

    Level is reclassified from the cached columns of THIS line, so it
    may differ from the line the format was learned on. The timestamp
    span is taken on trust and never checked.
    """
    if len(line) < fmt.source_start:
        return None

    level = classify_level(line[fmt.level_start:fmt.level_end])
    if level is None:
        return None

    source_end = find_source_end(line, fmt.source_start)
    if source_end is None:
        return None

    return LineFormat(
        level=level,
        ts_start=fmt.ts_start,
        ts_end=fmt.ts_end,
        level_start=fmt.level_start,
        level_end=fmt.level_end,
        source_start=fmt.source_start,
        source_end=source_end,
    )
