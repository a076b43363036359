"""Tests for the command-line wrapper (cli.py)."""

import io
import logging

import pytest
from manchu_converter.cli import main


def _manchu(*codepoints: int) -> str:
    """Build expected Manchu text from code points."""
    return "".join(chr(cp) for cp in codepoints)


BE = _manchu(0x182A, 0x185D)
MANJU = _manchu(0x182E, 0x1820, 0x1828, 0x1835, 0x1860)


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Run each test in an empty directory and reset logging afterwards."""
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("manchu_converter")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# ── Convert ───────────────────────────────────────────────────────────────────

def test_convert_text(capsys):
    assert main(["manju be"]) == 0
    assert capsys.readouterr().out == f"{MANJU} {BE}\n"


def test_convert_failure_exit_code(capsys):
    assert main(["manju 1644"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert 'Error: Valid syllable not found in ["1644"]' in captured.err


def test_convert_ignore_error(capsys):
    assert main(["--ignore-error", "manju 1644"]) == 0
    assert capsys.readouterr().out == f"{MANJU} 1644\n"


def test_convert_file(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("manju\nbe", encoding="utf-8")
    assert main(["--file", str(src)]) == 0
    assert capsys.readouterr().out == f"{MANJU}\n{BE}\n"


def test_convert_file_ending_in_newline(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("manju\nbe\n", encoding="utf-8")
    assert main(["--file", str(src)]) == 0
    assert capsys.readouterr().out == f"{MANJU}\n{BE}\n"


def test_convert_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("be"))
    assert main(["--file", "-"]) == 0
    assert capsys.readouterr().out == f"{BE}\n"


def test_convert_missing_file():
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", "nope.txt"])
    assert exc_info.value.code == 2


def test_no_input_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_text_and_file_together_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["be", "--file", "-"])
    assert exc_info.value.code == 2


# ── Codepoints ────────────────────────────────────────────────────────────────

def test_codepoints(capsys):
    assert main(["--codepoints", "be ng"]) == 0
    assert capsys.readouterr().out == "[U+182A U+185D] [U+1829]\n"


def test_codepoints_bad_word_fails(capsys):
    assert main(["--codepoints", "be q"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert '["q"]' in captured.err


def test_codepoints_ignore_error_marks_word(capsys):
    assert main(["--codepoints", "--ignore-error", "be q"]) == 0
    assert capsys.readouterr().out == "[U+182A U+185D] [q: ?]\n"


# ── Check ─────────────────────────────────────────────────────────────────────

def test_check_reports_bad_words(capsys):
    assert main(["--check", "q be q 1"]) == 1
    out = capsys.readouterr().out
    assert "Unconvertible words:" in out
    assert "  q\n  1\n" in out


def test_check_all_good(capsys):
    assert main(["--check", "cooha be acaha"]) == 0
    assert "All words convertible." in capsys.readouterr().out


# ── Config ────────────────────────────────────────────────────────────────────

def test_config_ignore_error(write_config, capsys):
    path = write_config("[converter]\nignore_error = true\n", name="custom.toml")
    assert main(["--config", str(path), "be 1"]) == 0
    assert capsys.readouterr().out == f"{BE} 1\n"


def test_default_config_auto_detected(write_config, capsys):
    write_config("[converter]\nignore_error = true\n")
    assert main(["be 1"]) == 0
    assert capsys.readouterr().out == f"{BE} 1\n"


def test_bad_config_is_usage_error(write_config):
    path = write_config('[logging]\nformat = "xml"\n', name="bad.toml")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(path), "be"])
    assert exc_info.value.code == 2


def test_bad_log_level_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "LOUD", "be"])
    assert exc_info.value.code == 2


def test_summary(capsys):
    assert main(["--summary"]) == 0
    assert "Phoneme table: 33 entries" in capsys.readouterr().out
