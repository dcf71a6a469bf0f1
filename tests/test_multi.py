import os

import pytest

from linereader.multi import FOPEN_MAX, MultiLineReader, get_next_line


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(content: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def drain(reader, fd):
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    return lines


def test_fopen_max_limits_module_function():
    assert FOPEN_MAX == 16
    assert get_next_line(FOPEN_MAX + 1) is None
    assert get_next_line(FOPEN_MAX + 100) is None


def test_interleaved_descriptors_keep_separate_buffers(open_fd):
    reader = MultiLineReader(buffer_size=300, max_fds=1024)
    first = open_fd(b"a1\na2\na3\n")
    second = open_fd(b"b1\nb2\n")
    assert reader.read_line(first) == b"a1\n"
    assert reader.read_line(second) == b"b1\n"
    assert reader.read_line(first) == b"a2\n"
    assert reader.read_line(second) == b"b2\n"
    assert reader.read_line(second) is None
    assert reader.read_line(first) == b"a3\n"
    assert reader.read_line(first) is None


@pytest.mark.parametrize("size", [1, 4, 300])
def test_reads_whole_file(open_fd, size):
    content = b"x\n\nyz\nlast"
    reader = MultiLineReader(buffer_size=size, max_fds=1024)
    lines = drain(reader, open_fd(content))
    assert b"".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_fd_out_of_range_returns_none(open_fd):
    reader = MultiLineReader(buffer_size=300, max_fds=1)
    fd = open_fd(b"data\n")
    assert fd >= 1
    assert reader.read_line(fd) is None
    assert reader.read_line(-1) is None


def test_reset_only_affects_one_fd(open_fd):
    reader = MultiLineReader(buffer_size=300, max_fds=1024)
    first = open_fd(b"a1\na2\n")
    second = open_fd(b"b1\nb2\n")
    assert reader.read_line(first) == b"a1\n"
    assert reader.read_line(second) == b"b1\n"
    reader.reset(first)
    assert reader.read_line(first) is None
    assert reader.read_line(second) == b"b2\n"


@pytest.mark.parametrize("kwargs", [{"buffer_size": 0}, {"max_fds": 0}])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        MultiLineReader(**kwargs)


def test_read_error_raises_oserror(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    reader = MultiLineReader(buffer_size=300, max_fds=1 << 20)
    with pytest.raises(OSError):
        reader.read_line(fd)


def test_module_get_next_line(open_fd):
    fd = open_fd(b"hello\nworld\n")
    assert fd < FOPEN_MAX
    assert get_next_line(fd) == b"hello\n"
    assert get_next_line(fd) == b"world\n"
    assert get_next_line(fd) is None


def test_module_get_next_line_rejects_large_fd():
    assert get_next_line(FOPEN_MAX + 1) is None