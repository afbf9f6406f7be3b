"""ASS -> Lyricify Syllable, two passes.

Pass 1 materialises every dialogue record; pass 2 resolves alignment codes,
which for background lines depend on the record before them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from lyricshift.alignment import PropertyTracker
from lyricshift.convert.ass_to_qrc import render_timed_segments
from lyricshift.convert.stream import LineWriter, ProgressCallback, iter_ass_events
from lyricshift.models import ConversionResult, DialogueRecord, Direction, MetadataEntry
from lyricshift.settings import ConverterSettings

logger = logging.getLogger(__name__)


def convert_ass_to_lys(
    lines: Iterable[str],
    writer: TextIO,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert an ASS line stream to LYS lines written to *writer*.

    Translation and romanization lines are left out of the output but still
    count as the previous line when resolving a background line.
    """
    settings = settings or ConverterSettings()
    result = ConversionResult(direction=Direction.ASS2LYS)
    records: list[DialogueRecord] = []

    for event in iter_ass_events(lines, result, settings):
        if isinstance(event, MetadataEntry):
            result.metadata.append(event)
        else:
            records.append(event)

    logger.debug("ass2lys: %d dialogue records collected", len(records))

    out = LineWriter(writer, result)
    out.write_all(entry.render() for entry in result.metadata)

    tracker = PropertyTracker()
    total = len(records)
    for i, record in enumerate(records, start=1):
        if settings.is_auxiliary(record.style):
            tracker.observe(record.role_tag)
        else:
            code, warned = tracker.advance(record.role_tag, record.line_number)
            if warned:
                result.warnings = True
            out.write(f"[{int(code)}]" + render_timed_segments(record.start_ms, record.segments))
        if progress_callback is not None:
            progress_callback(i, total)

    return result
