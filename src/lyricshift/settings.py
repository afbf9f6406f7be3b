"""Converter settings: style names, metadata key map and the ASS output header.

Defaults reproduce the fixed behaviour of the converter. A JSON file matching
:class:`ConverterSettings` can override any field, either passed explicitly
(``--config``) or named by the ``LYRICSHIFT_CONFIG`` environment variable.
"""
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from lyricshift.errors import SettingsError

CONFIG_ENV_VAR = "LYRICSHIFT_CONFIG"

DEFAULT_METADATA_KEYS: dict[str, str] = {
    "musicName": "ti",
    "artists": "ar",
    "album": "al",
    "ttmlAuthorGithubLogin": "by",
}

DEFAULT_STYLE_LINE = (
    "Style: Default,微软雅黑,100,&H00FFFFFF,&H004E503F,&H00000000,&H00000000,"
    "0,0,0,0,100,100,0,0,1,1.5,0.5,2,10,10,60,1"
)


class ConverterSettings(BaseModel):
    translation_styles: frozenset[str] = frozenset({"ts", "trans"})
    romanization_style: str = "roma"
    metadata_keys: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_METADATA_KEYS))
    play_res_x: int = Field(default=1920, gt=0)
    play_res_y: int = Field(default=1440, gt=0)
    style_line: str = DEFAULT_STYLE_LINE

    @field_validator("translation_styles", mode="before")
    @classmethod
    def lowercase_styles(cls, v):
        if isinstance(v, str):
            v = [v]
        return frozenset(s.strip().lower() for s in v)

    @field_validator("romanization_style", mode="before")
    @classmethod
    def lowercase_roma(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("style_line")
    @classmethod
    def style_line_prefix(cls, v: str) -> str:
        if not v.startswith("Style: Default,"):
            raise ValueError("style_line must define the 'Default' style")
        return v

    @property
    def auxiliary_styles(self) -> frozenset[str]:
        """Styles that carry no karaoke timing (translations and romanization)."""
        return self.translation_styles | {self.romanization_style}

    def is_auxiliary(self, style: str) -> bool:
        return style.strip().lower() in self.auxiliary_styles

    def is_translation(self, style: str) -> bool:
        return style.strip().lower() in self.translation_styles

    def is_romanization(self, style: str) -> bool:
        return style.strip().lower() == self.romanization_style


def load_settings(path: Path) -> ConverterSettings:
    """Load and validate a settings JSON file. Raises SettingsError on failure."""
    try:
        return ConverterSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        field_errors = "; ".join(
            f"{' -> '.join(str(x) for x in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise SettingsError(path, f"Schema validation failed: {field_errors}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(path, str(e)) from e


def resolve_settings(path: Optional[Path] = None) -> ConverterSettings:
    """Return settings from *path*, else from $LYRICSHIFT_CONFIG, else defaults."""
    if path is not None:
        return load_settings(path)
    env_val = os.environ.get(CONFIG_ENV_VAR)
    if env_val:
        return load_settings(Path(env_val).expanduser())
    return ConverterSettings()
