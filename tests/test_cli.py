import io

import pytest

from subzero import cli
from subzero.services.rendering import render_text


def _rows(text: str, **kwargs) -> str:
    return "".join(f"{line}\n" for line in render_text(text, **kwargs))


def test_words_are_joined_with_single_space(capsys):
    assert cli.main(["SUB", "ZERO"]) == cli.EXIT_OK
    assert capsys.readouterr().out == _rows("SUB ZERO")


def test_spacing_options(capsys):
    assert cli.main(["-s", "1", "-b", "0", "AB C"]) == cli.EXIT_OK
    assert capsys.readouterr().out == _rows("AB C", spaces=1, between=0)


def test_squash_flag_is_counted(capsys):
    assert cli.main(["-SS", "ZA"]) == cli.EXIT_OK
    assert capsys.readouterr().out == _rows("ZA", squash=2)


def test_too_much_squash(capsys):
    assert cli.main(["-SSSS", "A"]) == cli.EXIT_TOO_MUCH_SQUASH
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "fatal: you are squashing too much\n"


def test_no_input(capsys):
    assert cli.main([]) == cli.EXIT_NO_INPUT
    assert "fatal: no input provided" in capsys.readouterr().err


def test_reads_input_file(tmp_path, capsys):
    source = tmp_path / "words.txt"
    source.write_text("AB\nC\n", encoding="utf-8")
    assert cli.main(["--input", str(source)]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out == _rows("AB\nC\n")
    assert len(out.splitlines()) == 10


def test_missing_input_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert cli.main(["-i", str(missing)]) == 6
    assert f"fatal: could not read from file '{missing}'" in capsys.readouterr().err


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("HI\n"))
    assert cli.main(["-i", "-"]) == cli.EXIT_OK
    assert capsys.readouterr().out == _rows("HI")


def test_unreadable_stdin(monkeypatch, capsys):
    class BrokenStdin:
        def read(self):
            raise OSError("stream closed")

    monkeypatch.setattr("sys.stdin", BrokenStdin())
    assert cli.main(["-i", "-"]) == 5
    assert capsys.readouterr().err == "fatal: could not read from stdin: stream closed\n"


def test_text_and_input_conflict(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-i", "-", "A"])
    assert excinfo.value.code == 2


def test_negative_spacing_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-s", "-1", "A"])
    assert excinfo.value.code == 2


def test_help_shows_font_credit(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "Sub-Zero" in out
    assert out.index("Conversion to FigLet") < out.index("options:")


def test_write_art_flushes_per_input_line():
    class Recorder(io.StringIO):
        def __init__(self):
            super().__init__()
            self.flushed: list[int] = []

        def flush(self):
            self.flushed.append(len(self.getvalue().splitlines()))
            super().flush()

    out = Recorder()
    cli.write_art(cli.GlyphCompositor(), "A\nB", out)
    assert out.flushed == [5, 10]
