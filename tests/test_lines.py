import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.lines import BUFFER_SIZE, LineReader, read_lines


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.StringIO(data)
        self.sizes = []

    def read(self, size=-1):
        self.sizes.append(size)
        return self._inner.read(size)


class _FailingStream:
    def read(self, size=-1):
        raise OSError("read failed")


def test_default_buffer_size_is_used_for_reads():
    stream = _RecordingStream("abc\n")
    reader = LineReader(stream)
    reader.next_line()
    assert stream.sizes
    assert all(size == BUFFER_SIZE for size in stream.sizes)
    assert BUFFER_SIZE == 10


def test_text_lines_keep_newlines():
    reader = LineReader(io.StringIO("one\ntwo\nthree"))
    assert reader.next_line() == "one\n"
    assert reader.next_line() == "two\n"
    assert reader.next_line() == "three"
    assert reader.next_line() is None


def test_binary_lines():
    lines = list(read_lines(io.BytesIO(b"a\nbb\n"), 1))
    assert lines == [b"a\n", b"bb\n"]


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None
    assert list(read_lines(io.BytesIO(b""))) == []


def test_blank_lines_are_returned():
    assert list(read_lines(io.StringIO("\n\nx\n"), 3)) == ["\n", "\n", "x\n"]


def test_iteration_stops_at_end():
    reader = LineReader(io.StringIO("x\ny\n"))
    assert iter(reader) is reader
    assert next(reader) == "x\n"
    assert next(reader) == "y\n"
    with pytest.raises(StopIteration):
        next(reader)


def test_reads_again_after_stream_grows():
    stream = io.StringIO()
    reader = LineReader(stream, 4)
    assert reader.next_line() is None
    position = stream.tell()
    stream.write("late\n")
    stream.seek(position)
    assert reader.next_line() == "late\n"


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).next_line()


@pytest.mark.parametrize("size", [1, 2, 3, 10, 100])
def test_line_longer_than_buffer(size):
    data = "a" * 25 + "\n" + "b" * 7
    assert list(read_lines(io.StringIO(data), size)) == ["a" * 25 + "\n", "b" * 7]


@given(st.text(alphabet="ab\n"), st.integers(min_value=1, max_value=12))
def test_text_lines_round_trip(data, size):
    lines = list(read_lines(io.StringIO(data), size))
    assert "".join(lines) == data
    assert all(line for line in lines)
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all("\n" not in line[:-1] for line in lines)


@given(st.binary(), st.integers(min_value=1, max_value=12))
def test_binary_lines_round_trip(data, size):
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert lines == io.BytesIO(data).readlines()