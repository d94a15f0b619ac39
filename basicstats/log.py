"""Standard Python logging configuration."""

from __future__ import annotations

import logging
import sys

DEFAULT_LEVEL = "WARNING"


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    """Send basicstats logs to stderr; stdout is reserved for the report.

    Repeated calls only update the level.
    """
    root_logger = logging.getLogger("basicstats")
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.getLevelName(DEFAULT_LEVEL)
    root_logger.setLevel(numeric_level)

    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S %z",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.propagate = False

    setup_logging._configured = True  # type: ignore[attr-defined]
