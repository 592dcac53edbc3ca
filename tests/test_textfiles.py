import io

import pytest

from filekit.textfiles import read_lines, read_lines_until_blank, read_text, write_lines


def test_read_lines_until_blank_stops_at_blank():
    stream = io.StringIO("a\nb\n   \nc\n")
    assert read_lines_until_blank(stream) == ["a", "b"]
    assert stream.read() == "c\n"


def test_read_lines_until_blank_reads_to_end():
    assert read_lines_until_blank(io.StringIO("x\r\ny")) == ["x", "y"]


def test_read_lines_until_blank_empty_input():
    assert read_lines_until_blank(io.StringIO("")) == []


def test_write_then_read_round_trip(tmp_path):
    lines = ["hi i am thomas is learn rust boy", "  indented", "第三行"]
    path = tmp_path / "multiline.txt"
    write_lines(path, lines)
    assert read_lines(path) == lines


def test_write_lines_terminates_every_line(tmp_path):
    path = tmp_path / "out.txt"
    write_lines(path, ["one", "two"])
    content = path.read_bytes()
    assert content.endswith(b"\n")
    assert content.count(b"\n") == 2


def test_read_lines_handles_crlf_and_missing_final_newline(tmp_path):
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"alpha\r\nbeta\ngamma")
    assert read_lines(path) == ["alpha", "beta", "gamma"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "hi.txt")


def test_read_text_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(UnicodeDecodeError):
        read_text(path)