"""Read a file descriptor one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 300

_NEWLINE = b"\n"


def extract_line(buffer: bytes | None) -> bytes | None:
    """Return the first line of ``buffer``, newline included, or None if it is empty."""
    if not buffer:
        return None
    end = buffer.find(_NEWLINE)
    if end == -1:
        return bytes(buffer)
    return bytes(buffer[: end + 1])


def remaining_after_line(buffer: bytes | None) -> bytes | None:
    """Return what follows the first newline of ``buffer``, or None if it holds none."""
    if buffer is None:
        return None
    end = buffer.find(_NEWLINE)
    if end == -1:
        return None
    return bytes(buffer[end + 1 :])


def _fill_until_newline(fd: int, buffer: bytes | None, buffer_size: int) -> bytes:
    """Read ``fd`` in ``buffer_size`` chunks until a newline is buffered or input ends."""
    data = bytearray(buffer or b"")
    while _NEWLINE not in data:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        data += chunk
    return bytes(data)


def _next_line(
    fd: int, buffer: bytes | None, buffer_size: int
) -> tuple[bytes | None, bytes | None]:
    """Return the next line from ``fd`` and the data left over after it."""
    filled = _fill_until_newline(fd, buffer, buffer_size)
    return extract_line(filled), remaining_after_line(filled)


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")


class LineReader:
    """Reads lines from one file descriptor, keeping unread data between calls."""

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        _check_buffer_size(buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending: bytes | None = None

    def read_line(self) -> bytes | None:
        """Return the next line including its newline, or None at end of input."""
        try:
            line, self._pending = _next_line(self.fd, self._pending, self.buffer_size)
        except OSError:
            self._pending = None
            raise
        return line

    def reset(self) -> None:
        """Discard any data read but not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


class _SharedBuffer:
    """Holds the leftover data shared by every call to :func:`get_next_line`."""

    def __init__(self) -> None:
        self.pending: bytes | None = None


_shared = _SharedBuffer()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from ``fd``, or None at end of input.

    A single leftover buffer is shared by all calls. A negative ``fd``
    discards it and returns None.
    """
    if fd < 0:
        _shared.pending = None
        return None
    try:
        line, _shared.pending = _next_line(fd, _shared.pending, DEFAULT_BUFFER_SIZE)
    except OSError:
        _shared.pending = None
        raise
    return line