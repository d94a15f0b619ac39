"""Tests for basicstats.buffer.NumericBuffer."""

from unittest.mock import patch

import numpy as np
import pytest

from basicstats.buffer import DEFAULT_INITIAL_CAPACITY, NumericBuffer, create, release
from basicstats.errors import AllocationError, BufferReleasedError, InvalidArgumentError


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


def test_create_is_empty_with_requested_capacity():
    buf = create(5)
    assert buf.size == 0
    assert buf.capacity == 5
    assert len(buf) == 0
    assert buf.unused_capacity == 5


def test_default_capacity():
    assert NumericBuffer().capacity == DEFAULT_INITIAL_CAPACITY == 20


@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True, None])
def test_create_rejects_non_positive_or_non_integer(bad):
    with pytest.raises(InvalidArgumentError):
        create(bad)


def test_create_accepts_numpy_integer():
    assert create(np.int64(3)).capacity == 3


def test_create_allocation_failure():
    with patch("basicstats.buffer.np.empty", side_effect=MemoryError("boom")):
        with pytest.raises(AllocationError):
            create(4)


# ---------------------------------------------------------------------------
# append / growth
# ---------------------------------------------------------------------------


def test_append_within_capacity_does_not_grow():
    buf = create(4)
    for v in (1.0, 2.0, 3.0, 4.0):
        buf.append(v)
    assert buf.size == 4
    assert buf.capacity == 4


def test_append_doubles_when_full():
    buf = create(2)
    buf.extend([1.0, 2.0, 3.0])
    assert buf.capacity == 4
    buf.extend([4.0, 5.0])
    assert buf.capacity == 8


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 9, 100, 1025])
def test_capacity_is_smallest_power_of_two_from_one(n):
    buf = create(1)
    buf.extend(float(i) for i in range(n))
    assert buf.size == n
    expected = 1
    while expected < n:
        expected *= 2
    assert buf.capacity == expected


def test_values_preserved_in_order_across_growth():
    data = [3.5, -1.0, 7.25, 0.0, 1e10, -2.5, 42.0]
    buf = create(1)
    buf.extend(data)
    assert list(buf) == data
    assert buf[0] == 3.5
    assert buf[-1] == 42.0


def test_grow_failure_releases_buffer():
    buf = create(1)
    buf.append(1.0)
    with patch("basicstats.buffer.np.empty", side_effect=MemoryError("boom")):
        with pytest.raises(AllocationError):
            buf.append(2.0)
    assert buf.released
    assert buf.capacity == 0


# ---------------------------------------------------------------------------
# read access
# ---------------------------------------------------------------------------


def test_values_is_read_only_view_of_valid_slots():
    buf = create(8)
    buf.extend([1.0, 2.0])
    view = buf.values()
    assert view.tolist() == [1.0, 2.0]
    with pytest.raises(ValueError):
        view[0] = 9.0


def test_index_past_size_raises():
    buf = create(8)
    buf.append(1.0)
    with pytest.raises(IndexError):
        buf[1]


def test_sort_in_place():
    buf = create(2)
    buf.extend([3.0, 1.0, 2.0])
    buf.sort()
    assert list(buf) == [1.0, 2.0, 3.0]


def test_repr():
    buf = create(2)
    buf.append(1.0)
    assert repr(buf) == "NumericBuffer(size=1, capacity=2)"
    buf.release()
    assert repr(buf) == "NumericBuffer(released)"


# ---------------------------------------------------------------------------
# release
# ---------------------------------------------------------------------------


def test_release_is_idempotent():
    buf = create(2)
    buf.append(1.0)
    buf.release()
    buf.release()
    assert buf.released
    assert buf.size == 0


def test_release_none_is_noop():
    release(None)


def test_module_release_releases():
    buf = create(2)
    release(buf)
    assert buf.released


def test_use_after_release_raises():
    buf = create(2)
    buf.release()
    with pytest.raises(BufferReleasedError):
        buf.append(1.0)
    with pytest.raises(BufferReleasedError):
        buf.values()


def test_context_manager_releases_on_exit():
    with create(2) as buf:
        buf.append(1.0)
    assert buf.released


def test_context_manager_releases_on_error():
    with pytest.raises(RuntimeError):
        with create(2) as buf:
            raise RuntimeError("x")
    assert buf.released
