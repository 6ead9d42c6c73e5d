"""Domain models for session coordination."""

from session_coordination.domain.models.input_gate import (
    DEFAULT_PTT_KEY,
    GatePhase,
    InputGateState,
    KeyEvent,
    PushToTalkSettings,
)
from session_coordination.domain.models.latency_snapshot import (
    LatencySnapshot,
    QualityThresholds,
    QualityTier,
)
from session_coordination.domain.models.presence_entry import (
    STOP_TYPING_EVENT,
    TYPING_EVENT,
    ParticipantIdentity,
    PresenceEntry,
    StopTypingEvent,
    TypingEvent,
)
from session_coordination.domain.models.transport_stats import (
    CANDIDATE_PAIR,
    REMOTE_INBOUND_RTP,
    StatsReport,
)

__all__ = [
    "CANDIDATE_PAIR",
    "DEFAULT_PTT_KEY",
    "REMOTE_INBOUND_RTP",
    "STOP_TYPING_EVENT",
    "TYPING_EVENT",
    "GatePhase",
    "InputGateState",
    "KeyEvent",
    "LatencySnapshot",
    "ParticipantIdentity",
    "PresenceEntry",
    "PushToTalkSettings",
    "QualityThresholds",
    "QualityTier",
    "StatsReport",
    "StopTypingEvent",
    "TypingEvent",
]
