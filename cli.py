import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

from config import load_config
from input import MissingInputError, open_input, read_lines
from logsetup import configure_logging
from output import open_output

from tint.ingest import LinePipeline


__version__ = "0.1.0"

logger = logging.getLogger("tracetint")


# ---------------- CLI ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracetint",
        description=(
            "Recolour tracing logs and view them in less. "
            "Supports piping of input and output."
        ),
        epilog="Arguments after -- are passed directly to less.",
    )
    parser.add_argument("file", nargs="?", help="The log file to parse")
    parser.add_argument(
        "-P",
        "--pipe",
        action="store_true",
        help="Output directly to stdout for piping rather than opening less",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    argv = list(sys.argv[1:] if argv is None else argv)

    less_args: List[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, less_args = argv[:split], argv[split + 1:]

    args = build_parser().parse_args(argv)
    args.less_args = less_args
    return args


# ---------------- Run ----------------

def run(args: argparse.Namespace, pager: str, stdin: Optional[TextIO] = None) -> LinePipeline:
    pipeline = LinePipeline()

    with open_input(args.file, stdin=stdin) as stream:
        with open_output(args.pipe, pager, args.less_args) as sink:
            for line in read_lines(stream):
                sink.write_line(pipeline.process(line))

    return pipeline


def discard_stdout():
    # buffered output is flushed again at interpreter exit; it must land
    # somewhere that cannot raise BrokenPipeError a second time
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


# ---------------- Main ----------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"tracetint: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)

    try:
        pipeline = run(args, config.pager)
    except BrokenPipeError as e:
        if args.pipe:
            discard_stdout()
        logger.error("output closed early: %s", e)
        return 1
    except (MissingInputError, OSError, UnicodeDecodeError) as e:
        logger.error("%s", e)
        return 1

    metrics = pipeline.metrics
    logger.debug("Colorized lines : %d", metrics.colorized)
    logger.debug("Failed lines    : %d", metrics.failed)
    if metrics.learned_at is not None:
        logger.debug("Format learned from line %d", metrics.learned_at)
    for reason, count in metrics.failures_by_reason.items():
        logger.debug("  %s: %d", reason, count)

    return 0


if __name__ == "__main__":
    sys.exit(main())
