import io

import pytest

from subzero.services.text_source import (
    FileReadError,
    InputSourceError,
    StdinReadError,
    join_words,
    read_source,
)


def test_join_words():
    assert join_words(["sub", "zero"]) == "sub zero"
    assert join_words([]) == ""


def test_read_stdin_marker():
    assert read_source("-", stdin=io.StringIO("abc\n")) == "abc\n"


def test_read_file(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("zero\n", encoding="utf-8")
    assert read_source(str(source)) == "zero\n"


def test_missing_file(tmp_path):
    with pytest.raises(FileReadError) as excinfo:
        read_source(str(tmp_path / "nope.txt"))
    assert excinfo.value.message.startswith("could not read from file '")
    assert excinfo.value.exit_code == 6


def test_invalid_utf8_file(tmp_path):
    source = tmp_path / "bad.txt"
    source.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileReadError):
        read_source(str(source))


def test_broken_stdin():
    class Broken:
        def read(self):
            raise OSError("boom")

    with pytest.raises(StdinReadError) as excinfo:
        read_source("-", stdin=Broken())
    assert isinstance(excinfo.value, InputSourceError)
    assert excinfo.value.exit_code == 5
    assert str(excinfo.value) == "could not read from stdin: boom"
