"""Classification of the ASS "Name" field into singer roles.

The Name field may carry extra space-separated tags after the role keyword
(``"左 itunes:song-part=Verse"``); only the first token decides the category.
Matching is case-sensitive.
"""

from __future__ import annotations

from typing import Optional

from lyricshift.models import RoleCategory

PRIMARY_ROLES: frozenset[str] = frozenset({"左", "v1", "合", "v1000"})
DUET_ROLES: frozenset[str] = frozenset({"右", "v2", "x-duet", "x-anti"})
BACKGROUND_ROLES: frozenset[str] = frozenset({"背", "x-bg"})

# Exact Name values that mark an ASS file as duet-aware (LYS target) in
# automatic mode. Includes the empty Name.
SPECIAL_ROLE_NAMES: frozenset[str] = frozenset(
    {"", "v1", "左", "右", "v2", "x-duet", "x-anti", "背", "x-bg"}
)


def classify_role(role_tag: Optional[str]) -> tuple[RoleCategory, bool]:
    """Return ``(category, warned)`` for a role tag.

    ``warned`` is True only for a non-blank tag whose first token is not a
    known keyword; the caller decides how to report it.
    """
    if role_tag is None:
        return RoleCategory.PRIMARY, False
    tokens = role_tag.split()
    if not tokens:
        return RoleCategory.PRIMARY, False
    first = tokens[0]
    if first in PRIMARY_ROLES:
        return RoleCategory.PRIMARY, False
    if first in DUET_ROLES:
        return RoleCategory.DUET, False
    if first in BACKGROUND_ROLES:
        return RoleCategory.BACKGROUND, False
    return RoleCategory.OTHER, True


def is_special_role(name: str) -> bool:
    return name in SPECIAL_ROLE_NAMES
