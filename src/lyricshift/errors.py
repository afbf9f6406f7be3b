from pathlib import Path
from typing import Optional


class LyricShiftError(Exception):
    """Base class for all lyricshift errors."""


class TimeFormatError(LyricShiftError):
    def __init__(self, value: str, detail: str, line_number: Optional[int] = None) -> None:
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"Invalid ASS time '{value}'{where}.\n"
            f"  Cause: {detail}\n"
            f"  Check: ASS timestamps must look like H:MM:SS.cs (e.g. 0:01:02.34)."
        )
        self.value = value
        self.detail = detail
        self.line_number = line_number


class IntegerFieldError(LyricShiftError):
    def __init__(self, field: str, value: str, line_number: Optional[int] = None) -> None:
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(
            f"Field '{field}' is not a non-negative integer{where}: '{value}'."
        )
        self.field = field
        self.value = value
        self.line_number = line_number


class LineStructureError(LyricShiftError):
    def __init__(self, line_number: int, detail: str) -> None:
        super().__init__(
            f"Line {line_number} does not have the expected structure.\n"
            f"  Cause: {detail}"
        )
        self.line_number = line_number
        self.detail = detail


class ConversionIOError(LyricShiftError):
    def __init__(self, path: Optional[Path], detail: str) -> None:
        name = f"'{path.name}'" if path is not None else "stream"
        super().__init__(
            f"Cannot read or write {name}.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the file exist, and is the output directory writable?"
        )
        self.path = path
        self.detail = detail


class UnsupportedInputError(LyricShiftError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot decide how to convert '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Supported inputs are .ass, .qrc and .lys.\n"
            f"  Tip: Pass an explicit direction (ass2qrc, qrc2ass, ass2lys, lys2ass) and an output path."
        )
        self.path = path
        self.detail = detail


class SettingsError(LyricShiftError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot load settings '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is the file valid JSON matching the ConverterSettings schema?"
        )
        self.path = path
        self.detail = detail


class LrcExtractionError(LyricShiftError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Cannot extract LRC tracks.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is the input a complete ASS script with an [Events] section?"
        )
        self.detail = detail
