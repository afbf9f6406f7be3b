"""ASS ``Dialogue:`` line parser producing :class:`DialogueRecord`."""

from __future__ import annotations

from lyricshift.errors import LineStructureError, TimeFormatError
from lyricshift.grammar import ASS_DIALOGUE_RE, split_karaoke_segments
from lyricshift.models import DialogueRecord, TimedSegment
from lyricshift.timing import MS_PER_CENTISECOND, ass_time_to_ms, parse_uint


def parse_dialogue(line: str, line_number: int) -> DialogueRecord:
    """Parse one ASS dialogue line.

    Parameters
    ----------
    line:
        Raw line, without its trailing newline.
    line_number:
        1-based position of *line* in the input, carried into the record and
        into any error raised.

    Returns
    -------
    DialogueRecord
        Start/end in milliseconds, style, role tag (None when empty) and the
        karaoke segments in playback order. ``end < start`` is not an error;
        :attr:`DialogueRecord.duration_ms` clamps to 0.

    Raises
    ------
    LineStructureError
        If the line does not have the 10-field dialogue shape.
    TimeFormatError
        If the start or end time cannot be decoded.
    IntegerFieldError
        If a karaoke tag count is not an ASCII integer.
    """
    m = ASS_DIALOGUE_RE.match(line)
    if m is None:
        raise LineStructureError(line_number, "not a 10-field ASS Dialogue line")

    start_ms = _time_field(m.group("start"), line_number)
    end_ms = _time_field(m.group("end"), line_number)

    role = m.group("name")
    segments: list[TimedSegment] = []
    total = 0
    for raw_cs, text in split_karaoke_segments(m.group("text")):
        duration = parse_uint(raw_cs, "karaoke duration", line_number) * MS_PER_CENTISECOND
        total += duration
        segments.append(TimedSegment(text=text, duration_ms=duration))

    return DialogueRecord(
        line_number=line_number,
        start_ms=start_ms,
        end_ms=end_ms,
        style=m.group("style").strip(),
        role_tag=role if role else None,
        segments=tuple(segments),
        sum_segment_ms=total,
    )


def _time_field(value: str, line_number: int) -> int:
    try:
        return ass_time_to_ms(value)
    except TimeFormatError as e:
        raise TimeFormatError(value, e.detail, line_number) from e
