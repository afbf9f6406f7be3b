"""Tests for the lyricshift command line.

Input validation fires before any file is opened, and every failure ends in
a Rich panel with exit code 1 rather than a traceback.
"""

from pathlib import Path

from typer.testing import CliRunner

from conftest import ASS_DOCUMENT
from lyricshift.cli import app

runner = CliRunner()


def _write(tmp_path: Path, name: str, content: str) -> Path:
    p = tmp_path / name
    p.write_text(content, encoding="utf-8")
    return p


def test_missing_input_file(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.qrc")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_direction_without_output(tmp_path):
    """Manual mode needs both positional arguments."""
    src = _write(tmp_path, "song.qrc", "[0,100]a(0,100)\n")
    result = runner.invoke(app, [str(src), "qrc2ass"])
    assert result.exit_code == 1
    assert "Manual mode needs both" in result.output


def test_unknown_direction(tmp_path):
    src = _write(tmp_path, "song.qrc", "[0,100]a(0,100)\n")
    result = runner.invoke(app, [str(src), "qrc2srt", str(tmp_path / "out.ass")])
    assert result.exit_code == 1
    assert "Unknown direction" in result.output
    assert not (tmp_path / "out.ass").exists()


def test_unsupported_extension_in_automatic_mode(tmp_path):
    src = _write(tmp_path, "song.txt", "hello\n")
    result = runner.invoke(app, [str(src)])
    assert result.exit_code == 1
    assert "Cannot decide how to convert" in result.output


def test_manual_mode_with_alias(tmp_path):
    src = _write(tmp_path, "song.qrc", "[ti:T]\n[1000,100]a(1000,100)\n")
    out = tmp_path / "custom.ass"
    result = runner.invoke(app, [str(src), "2a", str(out)])
    assert result.exit_code == 0, result.output
    assert "Conversion complete" in result.output
    assert out.read_text(encoding="utf-8").splitlines()[-1].endswith(r"{\k10}a")


def test_automatic_ass_writes_lys_and_lrc(tmp_path):
    """Special roles route to LYS; translation tracks are always extracted."""
    src = _write(tmp_path, "song.ass", ASS_DOCUMENT)
    result = runner.invoke(app, [str(src)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "song_converted.lys").exists()
    assert (tmp_path / "song.zh-hans.lrc").read_text(encoding="utf-8") == "[00:03.00]你好\n"


def test_manual_ass_skips_lrc_unless_asked(tmp_path):
    src = _write(tmp_path, "song.ass", ASS_DOCUMENT)
    runner.invoke(app, [str(src), "ass2qrc", str(tmp_path / "a.qrc")])
    assert not (tmp_path / "song.zh-hans.lrc").exists()

    result = runner.invoke(app, [str(src), "ass2qrc", str(tmp_path / "b.qrc"), "--extract-lrc"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "song.zh-hans.lrc").exists()


def test_warnings_panel(tmp_path):
    src = _write(tmp_path, "song.lys", "[4]a(0,100)\nnot a lyric line\n")
    result = runner.invoke(app, [str(src)])
    assert result.exit_code == 0, result.output
    assert "Warnings" in result.output
    assert (tmp_path / "song_converted.ass").exists()


def test_bad_config(tmp_path):
    src = _write(tmp_path, "song.qrc", "[0,100]a(0,100)\n")
    cfg = _write(tmp_path, "settings.json", '{"play_res_x": 0}')
    result = runner.invoke(app, [str(src), "--config", str(cfg)])
    assert result.exit_code == 1
    assert "Conversion Error" in result.output


def test_lrc_failure_keeps_conversion(tmp_path):
    """An unwritable LRC target warns but the converted file and summary stay."""
    src = _write(tmp_path, "song.ass", ASS_DOCUMENT)
    (tmp_path / "song.zh-hans.lrc").mkdir()
    result = runner.invoke(app, [str(src)])
    assert result.exit_code == 0, result.output
    assert "LRC Extraction Skipped" in result.output
    assert "Conversion complete" in result.output
    assert (tmp_path / "song_converted.lys").exists()
