"""Lyricify Syllable -> ASS, streaming."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from lyricshift.convert.header import ass_header_lines, dialogue_line
from lyricshift.convert.stream import LineWriter, ProgressCallback, numbered_lines
from lyricshift.errors import IntegerFieldError, LyricShiftError
from lyricshift.grammar import LYS_PROPERTY_RE, iter_word_timestamps, trailing_text
from lyricshift.models import ConversionResult, Direction, LysProperty
from lyricshift.reconstruct import reconstruct_karaoke
from lyricshift.settings import ConverterSettings
from lyricshift.timing import ms_to_ass_time, parse_uint

logger = logging.getLogger(__name__)


def convert_lys_to_ass(
    lines: Iterable[str],
    writer: TextIO,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert LYS lines to an ASS script written to *writer*.

    LYS has no line header, so each line spans from its earliest word start
    to its latest word end. The property code becomes the ASS role
    (左 / 右 / 背 / empty).
    """
    settings = settings or ConverterSettings()
    result = ConversionResult(direction=Direction.LYS2ASS)
    out = LineWriter(writer, result)
    out.write_all(ass_header_lines(settings))

    for number, line in numbered_lines(lines, result):
        if progress_callback is not None:
            progress_callback(number, None)
        m = LYS_PROPERTY_RE.search(line)
        if m is None:
            if line.strip() and not line.startswith("["):
                logger.warning("Skipping unrecognised LYS line %d: %r", number, line)
                result.warnings = True
            continue

        try:
            prop = LysProperty.from_code(parse_uint(m.group(1), "property", number))
        except IntegerFieldError:
            prop = LysProperty.UNSET
        content = m.group(2)
        try:
            stamps = list(iter_word_timestamps(content, number))
        except LyricShiftError as e:
            logger.warning("Skipping LYS line %d: %s", number, e)
            result.warnings = True
            continue
        if not stamps:
            continue

        start_ms = min(s.start_ms for s in stamps)
        end_ms = max(s.end_ms for s in stamps)
        text = reconstruct_karaoke(stamps, trailing_text(content, stamps), start_ms, end_ms)
        if not text:
            continue
        out.write(dialogue_line(ms_to_ass_time(start_ms), ms_to_ass_time(end_ms), prop.role_name(), text))

    return result
