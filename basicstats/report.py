"""Results of a single basicstats run and their printed form."""

from dataclasses import dataclass
from typing import List


@dataclass
class Report:
    """Holds the statistics and buffer bookkeeping for one input file."""

    # Buffer bookkeeping at the end of the load
    size: int
    capacity: int

    mean: float
    median: float
    mode: float
    stddev: float
    harmonic_mean: float

    @property
    def unused_capacity(self) -> int:
        return self.capacity - self.size

    def format_report(self) -> List[str]:
        """Return the lines of the fixed-format report printed to stdout."""
        return [
            "Results:",
            "--------",
            f"Num values: {self.size}",
            f"Mean: {self.mean:.3f}",
            f"Median: {self.median:.3f}",
            f"Mode: {self.mode:.3f}",
            f"Standard Deviation: {self.stddev:.3f}",
            f"Harmonic Mean: {self.harmonic_mean:.3f}",
            f"Unused array capacity: {self.unused_capacity}",
        ]
