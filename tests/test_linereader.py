import io

import pytest

from cubray.linereader import LineReader, read_lines

TEXT = "NO ./north.png\nF 1,2,3\n\n111\n101\n111"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1024])
def test_lines_rebuild_the_text(size):
    lines = read_lines(io.StringIO(TEXT), size)
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("a\nb"), 4)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert read_lines(io.StringIO("")) == []
    assert LineReader(io.StringIO("")).read_line() is None


def test_blank_lines_are_kept():
    assert read_lines(io.StringIO("\n\nx\n"), 2) == ["\n", "\n", "x\n"]


def test_binary_stream():
    assert read_lines(io.BytesIO(b"ab\ncd\n"), 3) == [b"ab\n", b"cd\n"]


def test_iteration():
    reader = LineReader(io.StringIO("1\n2\n"), 1)
    assert list(reader) == ["1\n", "2\n"]


def test_reset_drops_read_ahead():
    reader = LineReader(io.StringIO("first\nsecond\n"), 1024)
    assert reader.read_line() == "first\n"
    reader.reset()
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_error_propagates():
    class Broken(io.StringIO):
        def read(self, size=-1):
            raise OSError("boom")

    reader = LineReader(Broken("x"), 4)
    with pytest.raises(OSError):
        reader.read_line()