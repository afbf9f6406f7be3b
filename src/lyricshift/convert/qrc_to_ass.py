"""QRC -> ASS, streaming."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from lyricshift.convert.header import ass_header_lines, dialogue_line
from lyricshift.convert.stream import LineWriter, ProgressCallback, numbered_lines
from lyricshift.errors import LyricShiftError
from lyricshift.grammar import QRC_HEADER_RE, iter_word_timestamps, trailing_text
from lyricshift.models import ConversionResult, Direction
from lyricshift.reconstruct import reconstruct_karaoke
from lyricshift.settings import ConverterSettings
from lyricshift.timing import ms_to_ass_time, parse_uint

logger = logging.getLogger(__name__)


def convert_qrc_to_ass(
    lines: Iterable[str],
    writer: TextIO,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert QRC lines to an ASS script written to *writer*.

    Lines without a ``[start,duration]`` header (metadata tags, blank lines)
    are ignored. Line timing comes from the header; silence inside it is
    filled with text-less karaoke tags.
    """
    settings = settings or ConverterSettings()
    result = ConversionResult(direction=Direction.QRC2ASS)
    out = LineWriter(writer, result)
    out.write_all(ass_header_lines(settings))

    for number, line in numbered_lines(lines, result):
        if progress_callback is not None:
            progress_callback(number, None)
        m = QRC_HEADER_RE.search(line)
        if m is None:
            continue
        try:
            start_ms = parse_uint(m.group(1), "line start", number)
            end_ms = start_ms + parse_uint(m.group(2), "line duration", number)
            content = line[m.end():]
            stamps = list(iter_word_timestamps(content, number))
        except LyricShiftError as e:
            logger.warning("Skipping QRC line %d: %s", number, e)
            result.warnings = True
            continue

        text = reconstruct_karaoke(stamps, trailing_text(content, stamps), start_ms, end_ms)
        if not text:
            logger.debug("QRC line %d produced no text", number)
            continue
        out.write(dialogue_line(ms_to_ass_time(start_ms), ms_to_ass_time(end_ms), "", text))

    return result
