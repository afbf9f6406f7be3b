"""Automatic conversion direction and output naming."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from lyricshift.alignment import is_special_role
from lyricshift.errors import UnsupportedInputError
from lyricshift.grammar import ASS_DIALOGUE_RE, DIALOGUE_PREFIX, is_events_header
from lyricshift.models import Direction

OUTPUT_SUFFIX = "_converted"


def has_special_roles(lines: Iterable[str]) -> bool:
    """True if any dialogue after the [Events] header uses a singer role name.

    An empty role counts, so most karaoke scripts qualify.
    """
    seen_header = False
    for line in lines:
        if not seen_header:
            seen_header = is_events_header(line)
            continue
        if not line.startswith(DIALOGUE_PREFIX):
            continue
        m = ASS_DIALOGUE_RE.match(line.rstrip("\r\n"))
        if m is not None and is_special_role(m.group("name")):
            return True
    return False


def detect_direction(path: Path, ass_lines: Iterable[str] = ()) -> Direction:
    """Pick a direction from *path*'s extension.

    ``.ass`` inputs need their lines: scripts with singer roles go to LYS,
    the rest to QRC.
    """
    ext = path.suffix.lower()
    if ext == ".lys":
        return Direction.LYS2ASS
    if ext == ".qrc":
        return Direction.QRC2ASS
    if ext == ".ass":
        return Direction.ASS2LYS if has_special_roles(ass_lines) else Direction.ASS2QRC
    raise UnsupportedInputError(path, f"unknown extension '{path.suffix or '(none)'}'")


def auto_output_path(path: Path, direction: Direction) -> Path:
    """``<stem>_converted<ext>`` next to *path*."""
    stem = path.stem or "output"
    return path.with_name(f"{stem}{OUTPUT_SUFFIX}{direction.target_extension}")
