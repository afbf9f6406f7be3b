"""File-level wrappers around the line-stream drivers.

Input encoding is UTF-8 (with or without BOM); anything else is detected with
charset-normalizer. Output is always UTF-8 with ``\\n`` line endings. Every
``OSError`` becomes :class:`ConversionIOError`.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Optional

from charset_normalizer import from_path

from lyricshift.convert import ProgressCallback, convert_lines
from lyricshift.errors import ConversionIOError
from lyricshift.extract import LrcTracks, render_lrc
from lyricshift.models import ConversionResult, Direction
from lyricshift.settings import ConverterSettings

logger = logging.getLogger(__name__)

_CHUNK = 64 * 1024


def sniff_encoding(path: Path) -> str:
    """Return the codec to read *path* with.

    The UTF-8 check decodes incrementally so large files are not held in
    memory.
    """
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        with path.open("rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK), b""):
                decoder.decode(chunk)
            decoder.decode(b"", final=True)
        return "utf-8-sig"
    except UnicodeDecodeError:
        pass
    except OSError as e:
        raise ConversionIOError(path, str(e)) from e

    best = from_path(path).best()
    if best is None:
        raise ConversionIOError(path, "Could not determine file encoding. Re-save as UTF-8.")
    logger.info("%s is not UTF-8; reading as %s", path.name, best.encoding)
    return best.encoding


def read_text(path: Path) -> str:
    encoding = sniff_encoding(path)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionIOError(path, str(e)) from e


def convert_file(
    direction: Direction,
    source: Path,
    destination: Path,
    settings: Optional[ConverterSettings] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ConversionResult:
    """Convert *source* to *destination*. I/O failures raise ConversionIOError."""
    encoding = sniff_encoding(source)
    try:
        with source.open("r", encoding=encoding, newline="") as fin, \
                destination.open("w", encoding="utf-8", newline="") as fout:
            return convert_lines(direction, fin, fout, settings, progress_callback)
    except OSError as e:
        raise ConversionIOError(Path(e.filename) if e.filename else source, str(e)) from e


def write_lrc_files(ass_path: Path, tracks: LrcTracks) -> list[Path]:
    """Write ``<stem>.<lang>.lrc`` per translation and ``<stem>.roma.lrc``.

    Returns the written paths in the order they were created.
    """
    outputs: list[tuple[Path, list[str]]] = [
        (ass_path.with_name(f"{ass_path.stem}.{lang}.lrc"), render_lrc(lines))
        for lang, lines in sorted(tracks.translations.items())
    ]
    if tracks.romanization:
        outputs.append((ass_path.with_name(f"{ass_path.stem}.roma.lrc"), render_lrc(tracks.romanization)))

    written: list[Path] = []
    for path, lines in outputs:
        try:
            path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        except OSError as e:
            raise ConversionIOError(path, str(e)) from e
        logger.info("Wrote %d LRC lines to %s", len(lines), path.name)
        written.append(path)
    return written
