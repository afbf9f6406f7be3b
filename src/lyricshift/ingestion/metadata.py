"""Metadata carried in ``meta``-styled ASS comment lines."""

from __future__ import annotations

from typing import Mapping, Optional

from lyricshift.grammar import META_COMMENT_RE
from lyricshift.models import MetadataEntry
from lyricshift.settings import DEFAULT_METADATA_KEYS


def parse_metadata_comment(
    line: str,
    key_map: Mapping[str, str] = DEFAULT_METADATA_KEYS,
) -> Optional[MetadataEntry]:
    """Return the metadata tag for a ``Comment: ...,meta,,0,0,0,,key:value`` line.

    Unknown keys, empty values and comments without a colon yield None.
    """
    m = META_COMMENT_RE.match(line)
    if m is None:
        return None
    key, sep, value = m.group(1).partition(":")
    if not sep:
        return None
    tag = key_map.get(key.strip())
    value = value.strip()
    if tag is None or not value:
        return None
    return MetadataEntry(tag=tag, value=value)

