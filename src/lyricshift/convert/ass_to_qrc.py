"""ASS -> QRC, single pass."""

from __future__ import annotations

from typing import Iterable, Optional, TextIO

from lyricshift.convert.stream import LineWriter, ProgressCallback, iter_ass_events
from lyricshift.models import ConversionResult, Direction, MetadataEntry, TimedSegment
from lyricshift.settings import ConverterSettings


def render_timed_segments(start_ms: int, segments: Iterable[TimedSegment]) -> str:
    """``text(abs_start,duration)`` for each non-empty segment, laid end to end from *start_ms*."""
    out: list[str] = []
    cursor = start_ms
    for seg in segments:
        if seg.is_empty:
            continue
        out.append(f"{seg.text}({cursor},{seg.duration_ms})")
        cursor += seg.duration_ms
    return "".join(out)


def convert_ass_to_qrc(
    lines: Iterable[str],
    writer: TextIO,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert an ASS line stream to QRC lines written to *writer*.

    Metadata tags are written first, so QRC lines are held until the input
    is exhausted.
    """
    settings = settings or ConverterSettings()
    result = ConversionResult(direction=Direction.ASS2QRC)
    body: list[str] = []

    for event in iter_ass_events(lines, result, settings, progress_callback):
        if isinstance(event, MetadataEntry):
            result.metadata.append(event)
            continue
        body.append(
            f"[{event.start_ms},{event.duration_ms}]"
            + render_timed_segments(event.start_ms, event.segments)
        )

    out = LineWriter(writer, result)
    out.write_all(entry.render() for entry in result.metadata)
    out.write_all(body)
    return result
