"""Shared inline fixtures: small ASS / QRC / LYS documents."""

from __future__ import annotations

import pytest

ASS_HEADER = """\
[Script Info]
ScriptType: v4.00+
PlayResX: 1920
PlayResY: 1440

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
"""

ASS_EVENTS = r"""Comment: 0,0:00:00.00,0:00:00.00,meta,,0,0,0,,musicName:Test Song
Comment: 0,0:00:00.00,0:00:00.00,meta,,0,0,0,,artists:Singer A
Comment: 0,0:00:00.00,0:00:00.00,meta,,0,0,0,,unknownKey:ignored
Dialogue: 0,0:00:01.00,0:00:02.50,Default,左,0,0,0,,{\k50}Hel{\k100}lo
Dialogue: 0,0:00:03.00,0:00:04.00,Default,背,0,0,0,,{\k60}oh{\k40}oh
Dialogue: 0,0:00:03.00,0:00:04.00,ts,x-lang:zh-Hans,0,0,0,,你好
Dialogue: 0,0:00:04.00,0:00:05.00,Default,背,0,0,0,,{\k100}yeah
Dialogue: 0,0:00:05.00,0:00:06.00,Default,右,0,0,0,,{\k100}hi
"""

ASS_DOCUMENT = ASS_HEADER + ASS_EVENTS


def ass_with(*event_lines: str) -> list[str]:
    """Header lines followed by *event_lines*, as a line list."""
    return ASS_HEADER.splitlines() + list(event_lines)


@pytest.fixture
def ass_lines() -> list[str]:
    return ASS_DOCUMENT.splitlines()
