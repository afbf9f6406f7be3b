"""Singer alignment: role tag classification and LYS property inference."""
from lyricshift.alignment.properties import PropertyTracker, infer_property
from lyricshift.alignment.roles import classify_role, is_special_role

__all__ = ["PropertyTracker", "classify_role", "infer_property", "is_special_role"]
