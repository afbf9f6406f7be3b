"""LYS property code inference.

A background line takes its side from the line before it; a run of
background lines keeps the code resolved for the first one.
"""

from __future__ import annotations

import logging
from typing import Optional

from lyricshift.alignment.roles import classify_role
from lyricshift.models import LysProperty, RoleCategory

logger = logging.getLogger(__name__)

_BACKGROUND_BY_PREVIOUS: dict[RoleCategory, LysProperty] = {
    RoleCategory.PRIMARY: LysProperty.BACK_LEFT,
    RoleCategory.DUET: LysProperty.BACK_RIGHT,
    RoleCategory.OTHER: LysProperty.BACK_UNSET,
}


def infer_property(
    current: RoleCategory,
    previous: RoleCategory,
    last_property: LysProperty,
) -> LysProperty:
    """Property code for a line given its category and the previous line's."""
    if current is RoleCategory.PRIMARY:
        return LysProperty.NO_BACK_LEFT
    if current is RoleCategory.DUET:
        return LysProperty.NO_BACK_RIGHT
    if current is RoleCategory.BACKGROUND:
        if previous is RoleCategory.BACKGROUND:
            return last_property
        return _BACKGROUND_BY_PREVIOUS[previous]
    return LysProperty.UNSET


class PropertyTracker:
    """Sequential property inference over consecutive lines.

    Holds the previous line's category (OTHER before the first line) and the
    last emitted code (UNSET before the first line).
    """

    def __init__(self) -> None:
        self.previous = RoleCategory.OTHER
        self.last_property = LysProperty.UNSET

    def advance(self, role_tag: Optional[str], line_number: int) -> tuple[LysProperty, bool]:
        """Resolve the next line. Returns ``(code, warned)``; logs once for an unknown role."""
        category, warned = classify_role(role_tag)
        if warned:
            logger.warning(
                "Line %d: unrecognised role '%s', no alignment will be set", line_number, role_tag
            )
        code = infer_property(category, self.previous, self.last_property)
        self.previous = category
        self.last_property = code
        return code, warned

    def observe(self, role_tag: Optional[str]) -> None:
        """Record a line that gets no code of its own (translation, romanization).

        It still becomes the previous line for the next background line;
        the last code is left as it was.
        """
        self.previous, _ = classify_role(role_tag)
