"""Line reading over several file descriptors with separate pending data."""

from __future__ import annotations

import os

from .reader import _NEWLINE, _fill, _take_line

DEFAULT_BUFFER_SIZE = 45


class MultiLineReader:
    """Reads lines from any number of file descriptors.

    Each descriptor keeps its own read-ahead data, so calls for different
    descriptors may be interleaved freely. A descriptor stops being tracked
    once its input is exhausted, a read on it fails, or it is discarded.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 0:
            raise ValueError(f"buffer size must not be negative, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, or None once it is exhausted."""
        if fd < 0:
            self.discard(fd)
            raise ValueError(f"invalid file descriptor: {fd}")
        try:
            os.read(fd, 0)
            pending = self._pending.setdefault(fd, bytearray())
            _fill(fd, pending, self.buffer_size)
        except OSError:
            self.discard(fd)
            raise
        line = _take_line(pending)
        if line is None or not line.endswith(_NEWLINE):
            self.discard(fd)
        return line

    def discard(self, fd: int) -> None:
        """Forget ``fd`` and any data read ahead from it."""
        self._pending.pop(fd, None)

    def __contains__(self, fd: object) -> bool:
        return fd in self._pending

    def __len__(self) -> int:
        return len(self._pending)