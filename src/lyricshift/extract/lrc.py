"""Translation and romanization tracks from ASS, rendered as line-timed LRC.

Translation events use a translation style (``ts`` / ``trans``) and name
their language in the role field as ``x-lang:<code>``; romanization events
use the ``roma`` style. Override blocks are stripped; only the start time of
each event is kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pysubs2

from lyricshift.errors import LrcExtractionError
from lyricshift.grammar import LANG_TAG_RE, strip_override_blocks
from lyricshift.settings import ConverterSettings
from lyricshift.timing import ms_to_lrc_time


@dataclass(frozen=True)
class LrcLine:
    start_ms: int
    text: str


@dataclass
class LrcTracks:
    translations: dict[str, list[LrcLine]] = field(default_factory=dict)
    romanization: list[LrcLine] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.translations and not self.romanization


def extract_lrc_tracks(ass_text: str, settings: Optional[ConverterSettings] = None) -> LrcTracks:
    """Collect translation (per language code, lowercased) and romanization lines.

    Raises
    ------
    LrcExtractionError
        If pysubs2 cannot parse *ass_text*.
    """
    settings = settings or ConverterSettings()
    try:
        subs = pysubs2.SSAFile.from_string(ass_text, format_="ass")
    except Exception as exc:
        raise LrcExtractionError(str(exc)) from exc

    tracks = LrcTracks()
    for event in subs:
        if event.is_comment:
            continue
        text = strip_override_blocks(event.text)
        if not text:
            continue
        line = LrcLine(start_ms=event.start, text=text)

        if settings.is_translation(event.style):
            m = LANG_TAG_RE.match(event.name.strip())
            if m is None:
                continue
            tracks.translations.setdefault(m.group("lang_code").lower(), []).append(line)
        elif settings.is_romanization(event.style):
            tracks.romanization.append(line)

    for lines in tracks.translations.values():
        lines.sort(key=lambda ln: ln.start_ms)
    tracks.romanization.sort(key=lambda ln: ln.start_ms)
    return tracks


def render_lrc(lines: list[LrcLine]) -> list[str]:
    return [f"{ms_to_lrc_time(ln.start_ms)}{ln.text}" for ln in lines]
