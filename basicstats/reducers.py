"""Descriptive statistics over a loaded set of values.

Every reducer accepts a NumericBuffer, a numpy array or any sequence of
floats, and none of them mutates its input.  ``median`` and ``mode`` expect
ascending order; run :func:`sort_values` once before calling them.

An empty dataset is refused with EmptyDatasetError by every reducer, rather
than producing NaN for some statistics and garbage for others.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import numpy as np

from .buffer import NumericBuffer
from .errors import DivideByZeroError, EmptyDatasetError, InvalidArgumentError

# Absolute convergence threshold for babylonian_sqrt.
SQRT_TOLERANCE = 1e-6

# Overflow to inf and inf - inf = nan follow IEEE-754 without numpy warnings.
_IEEE = {"over": "ignore", "divide": "ignore", "invalid": "ignore"}

Values = Union[NumericBuffer, np.ndarray, Sequence[float]]


def _as_array(values: Values, statistic: str) -> np.ndarray:
    if isinstance(values, NumericBuffer):
        arr = values.values()
    else:
        arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise EmptyDatasetError(f"cannot compute {statistic} of an empty dataset")
    return arr


def sort_values(values: Union[NumericBuffer, np.ndarray]) -> None:
    """Sort *values* in place, ascending, with NaN values last."""
    if not isinstance(values, (NumericBuffer, np.ndarray)):
        raise TypeError(f"cannot sort {type(values).__name__} in place")
    values.sort()


def babylonian_sqrt(value: float, tolerance: float = SQRT_TOLERANCE) -> float:
    """Square root by the Babylonian (Newton) method.

    ``x`` is the upper estimate and ``y = value / x`` the lower one; the loop
    averages them until they are within *tolerance* of each other, so the
    result is never more than *tolerance* above the true root.  Starts from
    ``x = value, y = 1`` (swapped when ``value < 1``).  Stops early if ``x``
    can no longer decrease in float precision.
    """
    if math.isnan(value):
        return value
    if value < 0:
        raise InvalidArgumentError(f"cannot take the square root of {value!r}")
    if value == 0:
        return 0.0
    x, y = (value, 1.0) if value >= 1.0 else (1.0, value)
    while x - y > tolerance:
        next_x = (x + y) / 2
        if next_x >= x:
            break
        x = next_x
        y = value / x
    return float(x)


def mean(values: Values) -> float:
    """Arithmetic mean."""
    arr = _as_array(values, "mean")
    with np.errstate(**_IEEE):
        return float(np.sum(arr)) / arr.size


def stddev(values: Values, mean_value: Optional[float] = None) -> float:
    """Population standard deviation (divisor ``n``).

    Pass *mean_value* when the mean is already known to skip recomputing it.
    """
    arr = _as_array(values, "standard deviation")
    with np.errstate(**_IEEE):
        if mean_value is None:
            mean_value = float(np.sum(arr)) / arr.size
        deviations = arr - mean_value
        variance = float(np.sum(deviations * deviations)) / arr.size
    return babylonian_sqrt(variance)


def median(values: Values) -> float:
    """Middle value of sorted *values*; mean of the two middle values for even sizes."""
    arr = _as_array(values, "median")
    middle = arr.size // 2
    if arr.size % 2 == 0:
        return (float(arr[middle - 1]) + float(arr[middle])) / 2.0
    return float(arr[middle])


def mode(values: Values) -> float:
    """Value of the longest run of equal neighbours in sorted *values*.

    On a tie the value whose run reached the maximum length first wins.
    """
    data = _as_array(values, "mode").tolist()
    best = data[0]
    best_run = 1
    run = 1
    for previous, current in zip(data, data[1:]):
        run = run + 1 if current == previous else 1
        if run > best_run:
            best_run = run
            best = current
    return float(best)


def harmonic_mean(values: Values) -> float:
    """``n / sum(1 / x)``.

    Raises DivideByZeroError if any value is 0 or the reciprocals cancel out.
    """
    arr = _as_array(values, "harmonic mean")
    if np.any(arr == 0):
        raise DivideByZeroError("cannot compute harmonic mean: dataset contains 0")
    with np.errstate(**_IEEE):
        denominator = float(np.sum(1.0 / arr))
    if denominator == 0:
        raise DivideByZeroError(
            "cannot compute harmonic mean: reciprocals sum to 0"
        )
    return arr.size / denominator
