"""basicstats-specific exceptions."""


class BasicStatsError(Exception):
    """Base class for every error raised by basicstats."""


class UsageError(BasicStatsError):
    """Raised when the command line does not name exactly one input file."""


class DataFileError(BasicStatsError, OSError):
    """Raised when the input file cannot be opened or read.

    The message carries the operating system's error text so the CLI can
    print it verbatim.
    """


class AllocationError(BasicStatsError, MemoryError):
    """Raised when buffer storage cannot be obtained.

    The buffer has already released its storage by the time this propagates;
    callers should report the failure and exit non-zero.
    """


class InvalidArgumentError(BasicStatsError, ValueError):
    """Raised for out-of-domain arguments (non-positive capacity, sqrt of a negative)."""


class BufferReleasedError(BasicStatsError):
    """Raised when a released buffer is used again."""


class StatisticsError(BasicStatsError, ArithmeticError):
    """A statistic is undefined for the given data."""


class EmptyDatasetError(StatisticsError):
    """Raised when a statistic is requested over zero values."""


class DivideByZeroError(StatisticsError):
    """Raised when a statistic would divide by zero (e.g. harmonic mean with a 0 element)."""
