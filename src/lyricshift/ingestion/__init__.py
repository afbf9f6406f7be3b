"""Reading ASS events: dialogue records, metadata comments and timing checks."""
from lyricshift.ingestion.consistency import check_record, check_time_consistency
from lyricshift.ingestion.dialogue import parse_dialogue
from lyricshift.ingestion.metadata import parse_metadata_comment

__all__ = [
    "check_record",
    "check_time_consistency",
    "parse_dialogue",
    "parse_metadata_comment",
]
