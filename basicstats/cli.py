"""CLI entry point: reads one numbers file, reports statistics to stdout."""

import sys
from typing import List, Optional

from .config import load_config
from .engine import run
from .errors import (
    AllocationError,
    DataFileError,
    InvalidArgumentError,
    StatisticsError,
    UsageError,
)
from .log import setup_logging


def _parse_args(argv: List[str]) -> str:
    if len(argv) != 1:
        raise UsageError("usage: basicstats <filename>")
    return argv[0]


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = _parse_args(argv)
    except UsageError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    config = load_config()
    setup_logging(config.log_level)
    try:
        report = run(path, config=config)
    except AllocationError as exc:
        print(f"basicstats: memory allocation failed: {exc}", file=sys.stderr)
        sys.exit(1)
    except (DataFileError, InvalidArgumentError, StatisticsError) as exc:
        print(f"basicstats: {exc}", file=sys.stderr)
        sys.exit(1)
    for line in report.format_report():
        print(line)
