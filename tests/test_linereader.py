import io

import pytest

from pixelfall.linereader import LineReader, iter_lines, split_first_line


SAMPLE = "1111\n1P01\n1CE1\n1111"


def test_split_first_line_with_newline():
    assert split_first_line("ab\ncd") == ("ab\n", "cd")


def test_split_first_line_without_newline():
    assert split_first_line("tail") == ("tail", "")


def test_split_first_line_empty():
    assert split_first_line("") == (None, "")


def test_split_first_line_only_newline():
    assert split_first_line("\n") == ("\n", "")


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64])
def test_buffer_size_does_not_change_lines(size):
    lines = list(iter_lines(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


def test_last_line_without_newline_is_returned():
    reader = LineReader(io.StringIO("a\nb"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "b"
    assert reader.next_line() is None


def test_end_of_input_stays_none():
    reader = LineReader(io.StringIO("x\n"), 4)
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""), 5)) == []


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\nz\n"))) == ["\n", "\n", "z\n"]


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("abc"), size)