"""Compiled patterns for the ASS, QRC and LYS line grammars."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from lyricshift.timing import parse_uint

# Column header that opens the [Events] section; everything before it is skipped.
EVENTS_FORMAT_PREFIX = "Format: Layer, Start, End, Style, Name,"
EVENTS_FORMAT_LINE = "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"

DIALOGUE_PREFIX = "Dialogue:"

# Dialogue: Layer,Start,End,Style,Name,MarginL,MarginR,MarginV,Effect,Text
ASS_DIALOGUE_RE = re.compile(
    r"^Dialogue:\s*[^,]+,"
    r"(?P<start>\d+:\d+:\d+\.\d+),"
    r"(?P<end>\d+:\d+:\d+\.\d+),"
    r"(?P<style>[^,]*),"
    r"(?P<name>[^,]*),"
    r"[^,]*,[^,]*,[^,]*,[^,]*,"
    r"(?P<text>.*)"
)

# {\kN} or {\kfN} followed by the syllable text up to the next tag.
KARAOKE_TAG_RE = re.compile(r"\{\\kf?(\d+)\}([^\\{]*)")

# [line_start_ms,line_duration_ms]
QRC_HEADER_RE = re.compile(r"\[(\d+),(\d+)\]")

# word(start_ms,duration_ms)
WORD_TIMESTAMP_RE = re.compile(r"\((?P<start>\d+),(?P<duration>\d+)\)")

# [property]content
LYS_PROPERTY_RE = re.compile(r"\[(\d+)\](.*)")

META_COMMENT_RE = re.compile(r"^Comment:\s*\d+,0:00:00\.00,0:00:00\.00,meta,,0,0,0,,(.*)")

LANG_TAG_RE = re.compile(r"^x-lang:(?P<lang_code>.+)$")

OVERRIDE_BLOCK_RE = re.compile(r"\{[^}]*\}")


@dataclass(frozen=True)
class WordTimestamp:
    """An inline ``(start,duration)`` stamp and the text that precedes it."""

    text_before: str
    start_ms: int
    duration_ms: int
    span: tuple[int, int]   # position of the stamp itself in the content string

    @property
    def end_ms(self) -> int:
        return self.start_ms + self.duration_ms


def is_events_header(line: str) -> bool:
    return line.lstrip().startswith(EVENTS_FORMAT_PREFIX)


def iter_word_timestamps(content: str, line_number: Optional[int] = None) -> Iterator[WordTimestamp]:
    """Yield every inline stamp in *content* in position order.

    ``text_before`` is the slice between the previous stamp (or the start of
    *content*) and this one. Text after the last stamp is not yielded; use
    :func:`trailing_text`.
    """
    cursor = 0
    for m in WORD_TIMESTAMP_RE.finditer(content):
        yield WordTimestamp(
            text_before=content[cursor:m.start()],
            start_ms=parse_uint(m.group("start"), "word start", line_number),
            duration_ms=parse_uint(m.group("duration"), "word duration", line_number),
            span=m.span(),
        )
        cursor = m.end()


def trailing_text(content: str, stamps: list[WordTimestamp]) -> str:
    """Text after the last stamp (the whole string when there are none)."""
    return content[stamps[-1].span[1]:] if stamps else content


def split_karaoke_segments(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(raw_centiseconds, syllable_text)`` for each karaoke tag in ASS *text*."""
    for m in KARAOKE_TAG_RE.finditer(text):
        yield m.group(1), m.group(2)


def strip_override_blocks(text: str) -> str:
    """Remove every ``{...}`` override block, leaving plain text."""
    return OVERRIDE_BLOCK_RE.sub("", text)
