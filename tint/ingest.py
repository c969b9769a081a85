import logging
from typing import Dict, Iterable, Iterator, Optional

from .colorize import colorize, failure_line
from .detect import learn
from .parsers import apply
from .types import GeneralFormat, LineFormat, PipelineState


logger = logging.getLogger(__name__)


# ---------- Metrics ----------

# failure reasons
NOT_LEARNABLE = "not_learnable"      # no format yet, and this line taught none
FORMAT_MISMATCH = "format_mismatch"  # the learned format did not fit this line


class LineMetrics:
    def __init__(self):
        self.colorized = 0
        self.failed = 0
        self.learned_at: Optional[int] = None  # 1-based line number
        self.failures_by_reason: Dict[str, int] = {}

    @property
    def lines(self) -> int:
        return self.colorized + self.failed

    def record_learned(self):
        self.learned_at = self.lines + 1

    def record_colorized(self):
        self.colorized += 1

    def record_failure(self, reason: str):
        self.failed += 1
        self.failures_by_reason[reason] = (
            self.failures_by_reason.get(reason, 0) + 1
        )


# ---------- Pipeline ----------

class LinePipeline:
    """
    Learn-once, apply-many line parser.

    Pipeline per line:
      UNLEARNED: learn from scratch
        -> success caches the GeneralFormat and moves to LEARNED
      LEARNED: apply the cached GeneralFormat

    The cached format is never replaced, and a LEARNED pipeline
    never goes back to UNLEARNED, whatever later lines look like.
    """

    def __init__(self):
        self.state = PipelineState.UNLEARNED
        self.general_format: Optional[GeneralFormat] = None
        self.metrics = LineMetrics()

    def parse(self, line: str) -> Optional[LineFormat]:
        if self.state is PipelineState.LEARNED:
            line_format = apply(line, self.general_format)
            if line_format is None:
                self._failed(line, FORMAT_MISMATCH)
                return None
        else:
            learned = learn(line)
            if learned is None:
                self._failed(line, NOT_LEARNABLE)
                return None
            line_format, general_format = learned
            self._learned(general_format)

        self.metrics.record_colorized()
        return line_format

    def process(self, line: str) -> str:
        line_format = self.parse(line)
        if line_format is None:
            return failure_line(line)
        return colorize(line, line_format)

    def _learned(self, general_format: GeneralFormat):
        self.general_format = general_format
        self.state = PipelineState.LEARNED
        self.metrics.record_learned()
        logger.debug(
            "learned line format from line %d: %s",
            self.metrics.learned_at,
            general_format,
        )

    def _failed(self, line: str, reason: str):
        self.metrics.record_failure(reason)
        logger.debug("failed to parse line (%s): %r", reason, line)


def colorize_lines(
    lines: Iterable[str],
    pipeline: Optional[LinePipeline] = None,
) -> Iterator[str]:
    """
    Run every line of one stream through a single pipeline.
    Lazy: one line is in flight at a time.
    """
    if pipeline is None:
        pipeline = LinePipeline()

    for line in lines:
        yield pipeline.process(line)
