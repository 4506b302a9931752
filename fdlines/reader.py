"""Read newline-terminated lines from a file descriptor, one call at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42

_NEWLINE = b"\n"


def _fill(fd: int, pending: bytearray, buffer_size: int) -> None:
    """Read chunks into ``pending`` until it holds a newline or the input ends."""
    while _NEWLINE not in pending:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        pending += chunk


def _take_line(pending: bytearray) -> bytes | None:
    """Remove and return the first line of ``pending``, newline included.

    Returns None when nothing is pending.
    """
    if not pending:
        return None
    end = pending.find(_NEWLINE)
    if end == -1:
        line = bytes(pending)
        pending.clear()
    else:
        line = bytes(pending[: end + 1])
        del pending[: end + 1]
    return line


class LineReader:
    """Reads one line at a time from a single file descriptor.

    Data read past the end of a line is kept and handed out by later calls.
    Each line keeps its trailing newline; the last line of the input may
    lack one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered data and is raised as OSError.
        """
        try:
            os.read(self.fd, 0)
            _fill(self.fd, self._pending, self.buffer_size)
        except OSError:
            self.reset()
            raise
        return _take_line(self._pending)

    def reset(self) -> None:
        """Drop any data read ahead but not yet returned."""
        self._pending.clear()

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line read from ``fd``."""
    yield from LineReader(fd, buffer_size)