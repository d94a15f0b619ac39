"""Read whitespace-separated numbers from a file into a NumericBuffer."""

from __future__ import annotations

import logging
import os
import re
from typing import IO, AnyStr, Iterator, Optional, Union

from .buffer import DEFAULT_INITIAL_CAPACITY, NumericBuffer, create
from .errors import AllocationError, DataFileError

logger = logging.getLogger(__name__)

# Bytes read per chunk while splitting the input into tokens.
_CHUNK_SIZE = 64 * 1024

# Decimal floating-point literal, or inf/infinity/nan; no Python-only syntax
# such as digit-group underscores.
_NUMBER = r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)"
_NUMBER_TEXT = re.compile(_NUMBER, re.IGNORECASE)
_NUMBER_BYTES = re.compile(_NUMBER.encode("ascii"), re.IGNORECASE)


def _tokens(stream: IO[AnyStr], chunk_size: int = _CHUNK_SIZE) -> Iterator[AnyStr]:
    """Yield whitespace-separated tokens, reading *stream* one chunk at a time."""
    pending: Optional[AnyStr] = None
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if pending:
            chunk = pending + chunk
        parts = chunk.split()
        # A chunk that ends mid-token carries the partial token forward.
        pending = None if chunk[-1:].isspace() else parts.pop()
        yield from parts
    if pending:
        yield pending


def parse_number(token: AnyStr) -> Optional[float]:
    """Return *token* as a float, or None if it is not a decimal number."""
    pattern = _NUMBER_BYTES if isinstance(token, bytes) else _NUMBER_TEXT
    if pattern.fullmatch(token) is None:
        return None
    return float(token)


def load_stream(stream: IO[AnyStr], buffer: NumericBuffer) -> int:
    """Append every leading numeric token of *stream* to *buffer*.

    A token is a number when it is a whole decimal literal (``1``, ``-2.5``,
    ``3e-4``) or ``inf``/``infinity``/``nan`` in any case.  Scanning stops at
    the first token that is not; whatever follows it is left unread.  Works on
    text and binary streams alike.  Returns the number of values appended.
    """
    count = 0
    for token in _tokens(stream):
        value = parse_number(token)
        if value is None:
            logger.debug("stopped at non-numeric token %r after %d values", token, count)
            break
        buffer.append(value)
        count += 1
    return count


def load(
    path: Union[str, os.PathLike],
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
) -> NumericBuffer:
    """Load the numbers in *path* into a new buffer.

    Raises DataFileError (with the OS error text) if the file cannot be opened
    or read, and AllocationError if memory runs out while reading.  The buffer
    is released before any error propagates, so the caller only owns it on
    success.
    """
    buffer = create(initial_capacity)
    try:
        fh = open(path, "rb")
    except OSError as exc:
        buffer.release()
        raise DataFileError(f"Error opening file '{path}': {exc.strerror or exc}") from exc
    try:
        with fh:
            count = load_stream(fh, buffer)
    except OSError as exc:
        buffer.release()
        raise DataFileError(f"Error reading file '{path}': {exc.strerror or exc}") from exc
    except AllocationError:
        buffer.release()
        raise
    except MemoryError as exc:
        buffer.release()
        raise AllocationError(f"out of memory while reading '{path}'") from exc
    except BaseException:
        buffer.release()
        raise
    logger.debug("loaded %d values from %s", count, path)
    return buffer
