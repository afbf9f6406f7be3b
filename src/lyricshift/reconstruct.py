"""Rebuild ``{\\kN}`` karaoke text from absolute word timestamps.

Shared by the QRC -> ASS and LYS -> ASS directions. Silence between words,
before the first word and before the line end becomes a text-less
``{\\kN}`` tag so the tag sum still covers the line.
"""

from __future__ import annotations

from typing import Sequence

from lyricshift.grammar import WordTimestamp
from lyricshift.timing import k_tag, k_value, saturating_sub


def reconstruct_karaoke(
    stamps: Sequence[WordTimestamp],
    trailing: str,
    line_start_ms: int,
    line_end_ms: int,
) -> str:
    """Return the ASS karaoke text for one line.

    Parameters
    ----------
    stamps:
        Word timestamps in order of appearance in the source line.
    trailing:
        Untimed text after the last stamp.
    line_start_ms, line_end_ms:
        Line boundaries; gaps to them are filled with text-less tags.

    Returns
    -------
    str
        Possibly empty; an empty result means the line should not be written.
        A zero K-value is never emitted as a tag.
    """
    parts: list[str] = []
    last_end = line_start_ms

    for stamp in stamps:
        gap = k_value(saturating_sub(stamp.start_ms, last_end))
        if gap > 0:
            parts.append(k_tag(gap))
        k = k_value(stamp.duration_ms)
        if k > 0:
            parts.append(k_tag(k) + stamp.text_before)
        elif stamp.text_before:
            parts.append(stamp.text_before)
        last_end = stamp.end_ms

    tail_k = k_value(saturating_sub(line_end_ms, last_end))
    if trailing:
        parts.append(k_tag(tail_k) + trailing if tail_k > 0 else trailing)
    elif tail_k > 0:
        parts.append(k_tag(tail_k))

    return "".join(parts)
