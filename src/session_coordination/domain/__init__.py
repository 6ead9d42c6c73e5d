"""Domain layer - models and collaborator contracts."""

from session_coordination.domain.models import (
    InputGateState,
    KeyEvent,
    LatencySnapshot,
    PresenceEntry,
    QualityTier,
)

__all__ = [
    "InputGateState",
    "KeyEvent",
    "LatencySnapshot",
    "PresenceEntry",
    "QualityTier",
]
