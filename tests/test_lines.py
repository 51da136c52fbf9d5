import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from minishell.lines import BUFFER_SIZE, LineReader


def _open_with(tmp_path, data: bytes, name: str = "input.txt") -> int:
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


@pytest.fixture
def reader_for(tmp_path):
    opened = []

    def make(data: bytes) -> LineReader:
        fd = _open_with(tmp_path, data, f"input{len(opened)}.txt")
        opened.append(fd)
        return LineReader(fd)

    yield make
    for fd in opened:
        os.close(fd)


def test_lines_keep_their_newline(reader_for):
    reader = reader_for(b"one\ntwo\n")
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() is None


def test_last_line_without_newline(reader_for):
    reader = reader_for(b"alpha\nbeta")
    assert list(reader) == ["alpha\n", "beta"]


def test_empty_input_gives_nothing(reader_for):
    reader = reader_for(b"")
    assert reader.read_line() is None
    assert list(reader) == []


def test_blank_lines_are_kept(reader_for):
    reader = reader_for(b"\n\nx\n")
    assert list(reader) == ["\n", "\n", "x\n"]


def test_line_longer_than_buffer(reader_for):
    long_line = "a" * (BUFFER_SIZE * 3 + 5) + "\n"
    reader = reader_for(long_line.encode() + b"tail")
    assert reader.read_line() == long_line
    assert reader.read_line() == "tail"
    assert reader.read_line() is None


def test_many_lines_within_one_chunk(reader_for):
    reader = reader_for(b"a\nb\nc\n")
    assert list(reader) == ["a\n", "b\n", "c\n"]


def test_end_of_input_is_repeatable(reader_for):
    reader = reader_for(b"only\n")
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"first\nsecond\n")
        os.close(write_end)
        write_end = -1
        assert list(LineReader(read_end)) == ["first\n", "second\n"]
    finally:
        os.close(read_end)
        if write_end >= 0:
            os.close(write_end)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_closed_descriptor_raises(tmp_path):
    fd = _open_with(tmp_path, b"data\n")
    os.close(fd)
    reader = LineReader(fd)
    with pytest.raises(OSError):
        reader.read_line()


def test_non_ascii_text(reader_for):
    text = "héllo wörld\nsecond ✓\n"
    reader = reader_for(text.encode("utf-8"))
    assert "".join(reader) == text


@settings(max_examples=50, deadline=None)
@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=300))
def test_round_trip(tmp_path_factory, text):
    path = tmp_path_factory.mktemp("lines") / "data.txt"
    path.write_bytes(text.encode("utf-8"))
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd))
    finally:
        os.close(fd)
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line for line in lines)