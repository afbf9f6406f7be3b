"""Tests for translation / romanization LRC extraction (pysubs2-backed)."""

from __future__ import annotations

from pathlib import Path

from conftest import ASS_HEADER
from lyricshift.extract import LrcLine, extract_lrc_tracks, render_lrc
from lyricshift.files import write_lrc_files
from lyricshift.settings import ConverterSettings

_TRACKS_ASS = ASS_HEADER + r"""Dialogue: 0,0:00:01.00,0:00:02.00,Default,左,0,0,0,,{\k100}la
Dialogue: 0,0:00:05.00,0:00:06.00,ts,x-lang:zh-Hans,0,0,0,,第二句
Dialogue: 0,0:00:01.00,0:00:02.00,ts,x-lang:zh-Hans,0,0,0,,第一句
Dialogue: 0,0:00:01.00,0:00:02.00,trans,x-lang:EN,0,0,0,,{\i1}First{\i0}
Dialogue: 0,0:00:01.00,0:00:02.00,ts,,0,0,0,,no language
Dialogue: 0,0:00:01.00,0:00:02.00,roma,,0,0,0,,{\k50}ro{\k50}ma
Dialogue: 0,0:00:03.00,0:00:04.00,roma,,0,0,0,,{\k100}
Comment: 0,0:00:02.00,0:00:03.00,roma,,0,0,0,,commented out
"""


class TestExtractLrcTracks:
    def test_translations_grouped_by_lowercased_language(self) -> None:
        tracks = extract_lrc_tracks(_TRACKS_ASS)
        assert sorted(tracks.translations) == ["en", "zh-hans"]
        assert tracks.translations["en"] == [LrcLine(1000, "First")]

    def test_lines_sorted_by_start(self) -> None:
        """Out-of-order events come back in time order."""
        tracks = extract_lrc_tracks(_TRACKS_ASS)
        assert [ln.text for ln in tracks.translations["zh-hans"]] == ["第一句", "第二句"]

    def test_romanization_stripped_and_filtered(self) -> None:
        """Override blocks are removed; empty results and comments are dropped."""
        tracks = extract_lrc_tracks(_TRACKS_ASS)
        assert tracks.romanization == [LrcLine(1000, "roma")]

    def test_no_tracks(self) -> None:
        ass = ASS_HEADER + "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\k100}la\n"
        assert extract_lrc_tracks(ass).is_empty()

    def test_custom_style_names(self) -> None:
        ass = ASS_HEADER + (
            "Dialogue: 0,0:00:01.00,0:00:02.00,Sub,x-lang:ja,0,0,0,,訳\n"
            "Dialogue: 0,0:00:01.00,0:00:02.00,Romaji,,0,0,0,,yaku\n"
        )
        settings = ConverterSettings(translation_styles=["Sub"], romanization_style="Romaji")
        tracks = extract_lrc_tracks(ass, settings)
        assert tracks.translations == {"ja": [LrcLine(1000, "訳")]}
        assert tracks.romanization == [LrcLine(1000, "yaku")]


def test_render_lrc() -> None:
    assert render_lrc([LrcLine(1000, "a"), LrcLine(83_450, "b")]) == ["[00:01.00]a", "[01:23.45]b"]


def test_write_lrc_files(tmp_path: Path) -> None:
    """One file per language plus the romanization file, named after the ASS stem."""
    ass_path = tmp_path / "song.ass"
    ass_path.write_text(_TRACKS_ASS, encoding="utf-8")

    written = write_lrc_files(ass_path, extract_lrc_tracks(_TRACKS_ASS))

    assert [p.name for p in written] == ["song.en.lrc", "song.zh-hans.lrc", "song.roma.lrc"]
    assert (tmp_path / "song.zh-hans.lrc").read_text(encoding="utf-8") == "[00:01.00]第一句\n[00:05.00]第二句\n"
    assert (tmp_path / "song.roma.lrc").read_text(encoding="utf-8") == "[00:01.00]roma\n"
