"""Fixed ASS script header written before converted dialogue."""

from lyricshift.grammar import EVENTS_FORMAT_LINE
from lyricshift.settings import ConverterSettings

STYLE_FORMAT_LINE = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding"
)


def ass_header_lines(settings: ConverterSettings) -> list[str]:
    return [
        "[Script Info]",
        f"PlayResX: {settings.play_res_x}",
        f"PlayResY: {settings.play_res_y}",
        "",
        "[V4+ Styles]",
        STYLE_FORMAT_LINE,
        settings.style_line,
        "",
        "[Events]",
        EVENTS_FORMAT_LINE,
    ]


def dialogue_line(start: str, end: str, role: str, text: str) -> str:
    return f"Dialogue: 0,{start},{end},Default,{role},0,0,0,,{text}"
