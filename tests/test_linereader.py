import io

import pytest

from ftkit.linereader import LineReader


class _RecordingStream(io.StringIO):
    def __init__(self, data):
        super().__init__(data)
        self.requests = []

    def read(self, size=-1):
        self.requests.append(size)
        return super().read(size)


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 5, 64])
def test_lines_join_back_to_input(buffer_size):
    data = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(data), buffer_size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_lines_keep_newline():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_blank_lines():
    reader = LineReader(io.StringIO("\n\n"), 4)
    assert list(reader) == ["\n", "\n"]


def test_binary_stream():
    data = b"alpha\nbeta\n"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == [b"alpha\n", b"beta\n"]


def test_reads_only_up_to_newline():
    stream = _RecordingStream("a\nbbbbbbbbbb")
    reader = LineReader(stream, 3)
    assert reader.read_line() == "a\n"
    assert stream.requests == [3]


def test_reads_in_buffer_sized_chunks():
    stream = _RecordingStream("abcdefg\n")
    reader = LineReader(stream, 2)
    assert reader.read_line() == "abcdefg\n"
    assert set(stream.requests) == {2}


def test_next_raises_stop_iteration_at_end():
    reader = LineReader(io.StringIO("x"))
    assert next(reader) == "x"
    with pytest.raises(StopIteration):
        next(reader)


@pytest.mark.parametrize("bad", [0, -3])
def test_non_positive_buffer_size_rejected(bad):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), bad)


def test_read_error_propagates():
    class _Broken:
        def read(self, size):
            raise OSError("boom")

    reader = LineReader(_Broken())
    with pytest.raises(OSError):
        reader.read_line()