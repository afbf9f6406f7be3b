"""Line-stream plumbing shared by the conversion drivers."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union

from lyricshift.errors import ConversionIOError, LyricShiftError
from lyricshift.grammar import DIALOGUE_PREFIX, is_events_header
from lyricshift.ingestion import check_record, parse_dialogue, parse_metadata_comment
from lyricshift.models import ConversionResult, DialogueRecord, MetadataEntry
from lyricshift.settings import ConverterSettings

logger = logging.getLogger(__name__)

# (current, total) -- total is None while a streaming pass cannot know it.
ProgressCallback = Callable[[int, Optional[int]], None]


def numbered_lines(lines: Iterable[str], result: ConversionResult) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` with line endings removed.

    Read failures of the underlying stream abort the conversion as
    ConversionIOError.
    """
    it = iter(lines)
    number = 0
    while True:
        try:
            raw = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionIOError(None, f"read failed after line {number}: {e}") from e
        number += 1
        result.lines_read = number
        yield number, raw.rstrip("\r\n")


class LineWriter:
    """Writes newline-terminated lines to *stream* and counts them."""

    def __init__(self, stream: TextIO, result: ConversionResult) -> None:
        self._stream = stream
        self._result = result

    def write(self, line: str) -> None:
        try:
            self._stream.write(line + "\n")
        except OSError as e:
            raise ConversionIOError(None, f"write failed: {e}") from e
        self._result.lines_written += 1

    def write_all(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)


AssEvent = Union[MetadataEntry, DialogueRecord]


def iter_ass_events(
    lines: Iterable[str],
    result: ConversionResult,
    settings: ConverterSettings,
    progress_callback: Optional[ProgressCallback] = None,
) -> Iterator[AssEvent]:
    """Walk an ASS stream and yield metadata entries and dialogue records.

    Lines before the ``[Events]`` column header are skipped. Malformed
    dialogue lines are logged and skipped; duration mismatches are logged.
    Both set ``result.warnings``.
    """
    seen_header = False
    for number, line in numbered_lines(lines, result):
        if progress_callback is not None:
            progress_callback(number, None)
        if not seen_header:
            seen_header = is_events_header(line)
            continue

        entry = parse_metadata_comment(line, settings.metadata_keys)
        if entry is not None:
            yield entry
            continue

        if not line.startswith(DIALOGUE_PREFIX):
            continue
        try:
            record = parse_dialogue(line, number)
        except LyricShiftError as e:
            logger.warning("Skipping dialogue on line %d: %s", number, e)
            result.warnings = True
            continue
        if not check_record(record, settings):
            result.warnings = True
        yield record

    if not seen_header:
        logger.warning("No '[Events]' column header found; nothing was converted")
        result.warnings = True
