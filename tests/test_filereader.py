import io

import pytest

from calcbench.filereader import FileReader


def make_reader(text, name="input"):
    return FileReader(io.StringIO(text), name)


def test_has_reads_on_demand_and_peek_sees_buffer():
    reader = make_reader("abc")
    assert reader.has(2)
    assert reader.peek(0) == "a"
    assert reader.peek(1) == "b"
    with pytest.raises(IndexError):
        reader.peek(2)


def test_has_zero_is_always_true():
    reader = make_reader("")
    assert reader.has(0)
    assert reader.good()


def test_has_beyond_end_sets_eof():
    reader = make_reader("abc")
    assert not reader.has(4)
    assert reader.eof()
    assert not reader.good()
    assert reader.view(3) == "abc"
    assert reader.has(3)


def test_view_returns_prefix():
    reader = make_reader("hello")
    assert reader.has(5)
    assert reader.view(0) == ""
    assert reader.view(4) == "hell"


def test_view_beyond_buffer_raises():
    reader = make_reader("hi")
    reader.has(1)
    with pytest.raises(IndexError):
        reader.view(2)


def test_commit_advances_column():
    reader = make_reader("abcdef")
    assert reader.has(6)
    reader.commit(3)
    assert (reader.line, reader.column) == (0, 3)
    assert reader.peek(0) == "d"


def test_commit_tracks_lines():
    reader = make_reader("ab\ncd\nef")
    assert reader.has(7)
    reader.commit(4)
    assert reader.line == 1
    assert reader.column == 1
    reader.commit(2)
    assert reader.line == 2
    assert reader.column == 0
    assert reader.peek(0) == "e"


def test_commit_beyond_buffer_raises():
    reader = make_reader("ab")
    reader.has(1)
    with pytest.raises(IndexError):
        reader.commit(2)


def test_str_without_stream():
    assert str(FileReader(None, "")) == "filereader( nofile )"


def test_str_shows_position_and_buffer():
    reader = make_reader("xyz", "data")
    reader.has(2)
    text = str(reader)
    assert text.startswith("filereader( data, 0, 0 ) : xy")
    assert text.endswith("\n")
    assert "end of file" not in text


def test_str_hex_escapes_unprintable():
    reader = make_reader("a\tb")
    reader.has(3)
    assert "{09}" in str(reader)


def test_str_reports_end_of_file():
    reader = make_reader("q")
    assert not reader.has(2)
    assert str(reader).endswith(" (end of file)\n")


def test_reader_without_stream_has_nothing():
    reader = FileReader(None, "")
    assert not reader.good()
    assert not reader.has(1)