"""Sort the loaded values once, run every reducer, and build the report."""

import logging
import os
from typing import Optional, Union

from .buffer import NumericBuffer
from .config import BasicStatsConfig, load_config
from .ingest import load
from .reducers import harmonic_mean, mean, median, mode, sort_values, stddev
from .report import Report

logger = logging.getLogger(__name__)


def analyze(buffer: NumericBuffer) -> Report:
    """Sort *buffer* in place and compute every statistic over it.

    Raises EmptyDatasetError for an empty buffer and DivideByZeroError when
    the harmonic mean is undefined; no partial report is produced.
    """
    sort_values(buffer)
    mean_value = mean(buffer)
    report = Report(
        size=buffer.size,
        capacity=buffer.capacity,
        mean=mean_value,
        median=median(buffer),
        mode=mode(buffer),
        stddev=stddev(buffer, mean_value),
        harmonic_mean=harmonic_mean(buffer),
    )
    logger.debug("analyzed %d values", report.size)
    return report


def run(
    path: Union[str, os.PathLike], config: Optional[BasicStatsConfig] = None
) -> Report:
    """Load *path*, analyze it, and release the buffer on every exit path."""
    if config is None:
        config = load_config()
    with load(path, initial_capacity=config.initial_capacity) as buffer:
        return analyze(buffer)
