"""Growable float64 buffer with doubling capacity."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

import numpy as np

from .errors import AllocationError, BufferReleasedError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Starting capacity used when the caller does not choose one.
DEFAULT_INITIAL_CAPACITY = 20


def _allocate(capacity: int) -> np.ndarray:
    try:
        return np.empty(capacity, dtype=np.float64)
    except (MemoryError, ValueError) as exc:
        raise AllocationError(
            f"could not allocate storage for {capacity} values: {exc}"
        ) from exc


class NumericBuffer:
    """Owned, append-only array of floats that doubles its capacity on overflow.

    Only slots ``[0, size)`` hold values; everything past ``size`` is
    uninitialised storage.  Use it as a context manager (or call
    :meth:`release`) so the storage is dropped exactly once.
    """

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY) -> None:
        if (
            isinstance(initial_capacity, bool)
            or not isinstance(initial_capacity, (int, np.integer))
            or initial_capacity < 1
        ):
            raise InvalidArgumentError(
                f"initial capacity must be a positive integer, got {initial_capacity!r}"
            )
        self._data: Optional[np.ndarray] = _allocate(int(initial_capacity))
        self._size = 0

    # ------------------------------------------------------------------
    # bookkeeping
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        if self._data is None:
            return 0
        return len(self._data)

    @property
    def unused_capacity(self) -> int:
        return self.capacity - self._size

    @property
    def released(self) -> bool:
        return self._data is None

    def _storage(self) -> np.ndarray:
        if self._data is None:
            raise BufferReleasedError("buffer has already been released")
        return self._data

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def _grow(self) -> None:
        """Double the capacity, keeping the first ``size`` values."""
        old = self._storage()
        new_capacity = 2 * len(old)
        try:
            new = _allocate(new_capacity)
        except AllocationError:
            self.release()
            raise
        new[: self._size] = old[: self._size]
        self._data = new
        logger.debug("buffer grown from %d to %d slots", len(old), new_capacity)

    def append(self, value: float) -> None:
        """Store *value* after the last element, growing first if full."""
        data = self._storage()
        if self._size == len(data):
            self._grow()
            data = self._storage()
        data[self._size] = value
        self._size += 1

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.append(value)

    def sort(self) -> None:
        """Sort the valid slots in place, ascending; NaN values go last."""
        self._storage()[: self._size].sort()

    def release(self) -> None:
        """Drop the owned storage.  Calling this again is a no-op."""
        if self._data is not None:
            logger.debug("buffer released (%d values)", self._size)
        self._data = None
        self._size = 0

    # ------------------------------------------------------------------
    # read access
    # ------------------------------------------------------------------

    def values(self) -> np.ndarray:
        """Return a read-only view of the valid slots."""
        view = self._storage()[: self._size]
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        for value in self.values():
            yield float(value)

    def __getitem__(self, index):
        return self.values()[index]

    def __enter__(self) -> "NumericBuffer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()

    def __repr__(self) -> str:
        if self.released:
            return "NumericBuffer(released)"
        return f"NumericBuffer(size={self._size}, capacity={self.capacity})"


def create(initial_capacity: int = DEFAULT_INITIAL_CAPACITY) -> NumericBuffer:
    """Return an empty buffer with room for *initial_capacity* values."""
    return NumericBuffer(initial_capacity)


def release(buffer: Optional[NumericBuffer]) -> None:
    """Release *buffer*; ``None`` and already-released buffers are ignored."""
    if buffer is not None:
        buffer.release()
