"""Millisecond <-> text time conversions for ASS, LRC and karaoke tags."""

from __future__ import annotations

from typing import Optional

from lyricshift.errors import IntegerFieldError, TimeFormatError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
# One ASS centisecond (and one karaoke K unit) in milliseconds.
MS_PER_CENTISECOND = 10


def ms_to_ass_time(ms: int) -> str:
    """Format *ms* as ``H:MM:SS.cs``. Sub-centisecond remainders are truncated."""
    hours = ms // MS_PER_HOUR
    minutes = (ms % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (ms % MS_PER_MINUTE) // MS_PER_SECOND
    centiseconds = (ms % MS_PER_SECOND) // MS_PER_CENTISECOND
    return f"{hours:01d}:{minutes:02d}:{seconds:02d}.{centiseconds:02d}"


def ass_time_to_ms(value: str) -> int:
    """Parse an ``H:MM:SS.cs`` string into milliseconds.

    Raises
    ------
    TimeFormatError
        If the string does not split into exactly four ASCII-decimal parts.
    """
    parts = value.replace(".", ":").split(":")
    if len(parts) != 4:
        raise TimeFormatError(value, f"expected 4 parts (H:MM:SS.cs), got {len(parts)}")
    for part in parts:
        if not _is_ascii_decimal(part):
            raise TimeFormatError(value, f"'{part}' is not a number")
    h, m, s, cs = (int(p) for p in parts)
    return h * MS_PER_HOUR + m * MS_PER_MINUTE + s * MS_PER_SECOND + cs * MS_PER_CENTISECOND


def ms_to_lrc_time(ms: int) -> str:
    """Format *ms* as an LRC line stamp ``[MM:SS.xx]`` (minutes are not wrapped)."""
    minutes = ms // MS_PER_MINUTE
    seconds = (ms % MS_PER_MINUTE) // MS_PER_SECOND
    hundredths = (ms % MS_PER_SECOND) // MS_PER_CENTISECOND
    return f"[{minutes:02d}:{seconds:02d}.{hundredths:02d}]"


def k_value(duration_ms: int) -> int:
    """Karaoke K-value (centiseconds) for a millisecond duration, rounding half up."""
    return (duration_ms + MS_PER_CENTISECOND // 2) // MS_PER_CENTISECOND


def k_tag(value: int) -> str:
    return "{\\k%d}" % value


def saturating_sub(a: int, b: int) -> int:
    return a - b if a > b else 0


def parse_uint(value: str, field: str, line_number: Optional[int] = None) -> int:
    """Parse a non-negative ASCII integer field, raising IntegerFieldError otherwise.

    The grammar patterns use ``\\d`` which also matches non-ASCII digits
    (e.g. full-width ``１``); those are rejected here.
    """
    if not _is_ascii_decimal(value):
        raise IntegerFieldError(field, value, line_number)
    return int(value)


def _is_ascii_decimal(value: str) -> bool:
    return bool(value) and value.isascii() and value.isdigit()
