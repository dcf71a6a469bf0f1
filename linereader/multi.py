"""Line reading that keeps a separate leftover buffer for each file descriptor."""

from __future__ import annotations

from linereader.reader import DEFAULT_BUFFER_SIZE, _check_buffer_size, _next_line

FOPEN_MAX = 16


class MultiLineReader:
    """Reads lines from several file descriptors without mixing their data."""

    def __init__(
        self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fds: int = FOPEN_MAX
    ) -> None:
        _check_buffer_size(buffer_size)
        if max_fds <= 0:
            raise ValueError(f"max_fds must be positive, got {max_fds}")
        self.buffer_size = buffer_size
        self.max_fds = max_fds
        self._pending: dict[int, bytes] = {}

    def _accepts(self, fd: int) -> bool:
        return 0 <= fd < self.max_fds

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, or None at end of input or for an fd out of range."""
        if not self._accepts(fd):
            return None
        try:
            line, rest = _next_line(fd, self._pending.get(fd), self.buffer_size)
        except OSError:
            self._pending.pop(fd, None)
            raise
        if rest is None:
            self._pending.pop(fd, None)
        else:
            self._pending[fd] = rest
        return line

    def reset(self, fd: int) -> None:
        """Discard data buffered for ``fd``."""
        self._pending.pop(fd, None)


_shared = MultiLineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from ``fd`` using a buffer kept for that descriptor."""
    return _shared.read_line(fd)