import os

import pytest

from fdlines.multi import MultiLineReader


@pytest.fixture
def pipe_with():
    opened = []

    def make(data: bytes) -> int:
        r, w = os.pipe()
        os.write(w, data)
        os.close(w)
        opened.append(r)
        return r

    yield make
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.mark.parametrize("buffer_size", [1, 4, 45])
def test_interleaved_descriptors(pipe_with, buffer_size):
    first = pipe_with(b"a1\na2\na3")
    second = pipe_with(b"b1\nb2\n")
    reader = MultiLineReader(buffer_size)
    assert reader.read_line(first) == b"a1\n"
    assert reader.read_line(second) == b"b1\n"
    assert reader.read_line(first) == b"a2\n"
    assert reader.read_line(second) == b"b2\n"
    assert reader.read_line(first) == b"a3"
    assert reader.read_line(second) is None
    assert reader.read_line(first) is None
    assert len(reader) == 0


def test_tracking_follows_exhaustion(pipe_with):
    fd = pipe_with(b"only\n")
    reader = MultiLineReader()
    assert fd not in reader
    assert reader.read_line(fd) == b"only\n"
    assert fd in reader
    assert len(reader) == 1
    assert reader.read_line(fd) is None
    assert fd not in reader


def test_unterminated_last_line_untracks(pipe_with):
    fd = pipe_with(b"tail")
    reader = MultiLineReader()
    assert reader.read_line(fd) == b"tail"
    assert fd not in reader


def test_discard_drops_read_ahead(pipe_with):
    fd = pipe_with(b"x\ny\n")
    reader = MultiLineReader(45)
    assert reader.read_line(fd) == b"x\n"
    reader.discard(fd)
    assert fd not in reader
    assert reader.read_line(fd) is None


def test_discard_unknown_fd_leaves_others(pipe_with):
    fd = pipe_with(b"x\ny\n")
    reader = MultiLineReader()
    reader.read_line(fd)
    reader.discard(fd + 100)
    assert len(reader) == 1


def test_whole_stream_round_trip(pipe_with):
    data = b"red\ngreen\nblue\n" * 10
    fd = pipe_with(data)
    reader = MultiLineReader(7)
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_zero_buffer_size_reads_nothing(pipe_with):
    fd = pipe_with(b"data\n")
    reader = MultiLineReader(0)
    assert reader.read_line(fd) is None
    assert len(reader) == 0


def test_negative_buffer_size_rejected():
    with pytest.raises(ValueError):
        MultiLineReader(-1)


def test_negative_fd_rejected():
    reader = MultiLineReader()
    with pytest.raises(ValueError):
        reader.read_line(-1)


def test_closed_fd_raises_and_untracks(pipe_with):
    r, w = os.pipe()
    os.write(w, b"x\ny\n")
    os.close(w)
    reader = MultiLineReader()
    assert reader.read_line(r) == b"x\n"
    os.close(r)
    with pytest.raises(OSError):
        reader.read_line(r)
    assert r not in reader


def test_default_buffer_size():
    assert MultiLineReader().buffer_size == 45