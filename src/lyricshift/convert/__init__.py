"""Conversion drivers between ASS, QRC and LYS line streams."""
from typing import Iterable, Optional, TextIO

from lyricshift.convert.ass_to_lys import convert_ass_to_lys
from lyricshift.convert.ass_to_qrc import convert_ass_to_qrc
from lyricshift.convert.lys_to_ass import convert_lys_to_ass
from lyricshift.convert.qrc_to_ass import convert_qrc_to_ass
from lyricshift.convert.stream import ProgressCallback
from lyricshift.models import ConversionResult, Direction
from lyricshift.settings import ConverterSettings

_DRIVERS = {
    Direction.ASS2QRC: convert_ass_to_qrc,
    Direction.QRC2ASS: convert_qrc_to_ass,
    Direction.ASS2LYS: convert_ass_to_lys,
    Direction.LYS2ASS: convert_lys_to_ass,
}


def convert_lines(
    direction: Direction,
    lines: Iterable[str],
    writer: TextIO,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Run the driver for *direction* over *lines*, writing to *writer*."""
    return _DRIVERS[direction](lines, writer, settings, progress_callback)


__all__ = [
    "ProgressCallback",
    "convert_ass_to_lys",
    "convert_ass_to_qrc",
    "convert_lines",
    "convert_lys_to_ass",
    "convert_qrc_to_ass",
]
