from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional


@dataclass(frozen=True)
class TimedSegment:
    """One karaoke syllable: the text shown while its timer runs."""

    text: str
    duration_ms: int

    @property
    def is_empty(self) -> bool:
        return not self.text and self.duration_ms == 0


@dataclass(frozen=True)
class DialogueRecord:
    """A parsed ASS ``Dialogue:`` line with its karaoke segments."""

    line_number: int    # 1-based position in the source stream
    start_ms: int
    end_ms: int
    style: str
    role_tag: Optional[str]     # ASS "Name" field; None when empty
    segments: tuple[TimedSegment, ...] = ()
    sum_segment_ms: int = 0

    @property
    def duration_ms(self) -> int:
        return max(self.end_ms - self.start_ms, 0)


class RoleCategory(str, Enum):
    """Semantic category of an ASS role tag.

    str, Enum keeps the value printable in log lines ("PRIMARY" rather than
    <RoleCategory.PRIMARY: ...>).
    """
    PRIMARY = "PRIMARY"
    DUET = "DUET"
    BACKGROUND = "BACKGROUND"
    OTHER = "OTHER"


class LysProperty(IntEnum):
    """Lyricify Syllable alignment/background code written as ``[N]``."""
    UNSET = 0
    LEFT = 1
    RIGHT = 2
    NO_BACK_LEFT = 4
    NO_BACK_RIGHT = 5
    BACK_UNSET = 6
    BACK_LEFT = 7
    BACK_RIGHT = 8

    def role_name(self) -> str:
        """ASS role tag that reproduces this code when converted back."""
        if self in (LysProperty.LEFT, LysProperty.NO_BACK_LEFT, LysProperty.BACK_LEFT):
            return "左"
        if self in (LysProperty.RIGHT, LysProperty.NO_BACK_RIGHT, LysProperty.BACK_RIGHT):
            return "右"
        if self is LysProperty.BACK_UNSET:
            return "背"
        return ""

    @classmethod
    def from_code(cls, code: int) -> "LysProperty":
        """Map a raw code to a member; unknown codes (e.g. 3) become UNSET."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNSET


@dataclass(frozen=True)
class MetadataEntry:
    tag: str
    value: str

    def render(self) -> str:
        return f"[{self.tag}:{self.value}]"


class Direction(str, Enum):
    ASS2QRC = "ass2qrc"
    QRC2ASS = "qrc2ass"
    ASS2LYS = "ass2lys"
    LYS2ASS = "lys2ass"

    @property
    def target_extension(self) -> str:
        return {
            Direction.ASS2QRC: ".qrc",
            Direction.QRC2ASS: ".ass",
            Direction.ASS2LYS: ".lys",
            Direction.LYS2ASS: ".ass",
        }[self]

    @property
    def source_is_ass(self) -> bool:
        return self in (Direction.ASS2QRC, Direction.ASS2LYS)

    @classmethod
    def parse(cls, text: str) -> Optional["Direction"]:
        """Resolve a user-typed direction, including the short aliases. None if unknown."""
        return _DIRECTION_ALIASES.get(text.strip().lower())


_DIRECTION_ALIASES: dict[str, Direction] = {
    "ass2qrc": Direction.ASS2QRC,
    "2q": Direction.ASS2QRC,
    "qrc2ass": Direction.QRC2ASS,
    "2a": Direction.QRC2ASS,
    "ass2lys": Direction.ASS2LYS,
    "2l": Direction.ASS2LYS,
    "lys2ass": Direction.LYS2ASS,
    "l2a": Direction.LYS2ASS,
}


@dataclass
class ConversionResult:
    """Outcome of one conversion call. ``warnings`` is True if any line was reported."""

    direction: Direction
    lines_read: int = 0
    lines_written: int = 0
    warnings: bool = False
    metadata: list[MetadataEntry] = field(default_factory=list)
