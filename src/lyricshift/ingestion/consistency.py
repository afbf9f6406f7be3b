"""Line duration vs. karaoke tag sum check."""

import logging

from lyricshift.models import DialogueRecord
from lyricshift.settings import ConverterSettings

logger = logging.getLogger(__name__)


def check_time_consistency(expected_ms: int, actual_ms: int, line_number: int) -> bool:
    """Return False and log a warning when the tag sum differs from the line duration."""
    if expected_ms != actual_ms:
        logger.warning(
            "Line %d: karaoke tags sum to %d ms but the line lasts %d ms",
            line_number, actual_ms, expected_ms,
        )
        return False
    return True


def check_record(record: DialogueRecord, settings: ConverterSettings) -> bool:
    """Check *record*; translation and romanization lines always pass."""
    if settings.is_auxiliary(record.style):
        return True
    return check_time_consistency(record.duration_ms, record.sum_segment_ms, record.line_number)
