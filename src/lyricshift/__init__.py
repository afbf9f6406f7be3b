"""lyricshift: karaoke lyric conversion between ASS, QRC and Lyricify Syllable."""
from lyricshift.convert import convert_lines
from lyricshift.models import ConversionResult, Direction

__version__ = "1.0.0"

__all__ = ["ConversionResult", "Direction", "convert_lines", "__version__"]
