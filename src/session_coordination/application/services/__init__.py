"""Application services."""

from session_coordination.application.services.key_capture import (
    KeyCapture,
    get_key_display_name,
    is_bindable_key,
)
from session_coordination.application.services.push_to_talk import PushToTalkArbiter
from session_coordination.application.services.quality_classifier import (
    ESTIMATED_THRESHOLDS,
    STANDARD_THRESHOLDS,
    classify_quality,
    round_half_away_from_zero,
)

__all__ = [
    "ESTIMATED_THRESHOLDS",
    "STANDARD_THRESHOLDS",
    "KeyCapture",
    "PushToTalkArbiter",
    "classify_quality",
    "get_key_display_name",
    "is_bindable_key",
    "round_half_away_from_zero",
]
