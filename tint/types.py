from dataclasses import dataclass
from enum import Enum, auto

from .levels import LevelKind


@dataclass(frozen=True)
class GeneralFormat:
    """
    Field positions assumed stable for a whole input stream.

    Learned once from the first parseable line:
    - timestamp span
    - level span
    - where the source starts

    The source end is NOT here: it moves with every line.
    """
    ts_start: int
    ts_end: int
    level_start: int
    level_end: int
    source_start: int


@dataclass(frozen=True)
class LineFormat:
    """
    Fully resolved layout of a single line.

    Built fresh per line and thrown away once the line is rendered.
    All spans are half-open [start, end).
    """
    level: LevelKind
    ts_start: int
    ts_end: int
    level_start: int
    level_end: int
    source_start: int
    source_end: int

    def general(self) -> GeneralFormat:
        return GeneralFormat(
            ts_start=self.ts_start,
            ts_end=self.ts_end,
            level_start=self.level_start,
            level_end=self.level_end,
            source_start=self.source_start,
        )


class PipelineState(Enum):
    """
    UNLEARNED -> LEARNED is the only transition. There is no way back.
    """
    UNLEARNED = auto()
    LEARNED = auto()
