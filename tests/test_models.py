"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from session_coordination.domain.models import (
    InputGateState,
    LatencySnapshot,
    ParticipantIdentity,
    PushToTalkSettings,
    QualityTier,
    StatsReport,
    StopTypingEvent,
    TypingEvent,
)


def test_latency_snapshot_defaults() -> None:
    """Given no data, when creating a LatencySnapshot, then it is the initial disconnected value."""
    snapshot = LatencySnapshot()

    assert snapshot.round_trip_ms == 0
    assert snapshot.jitter_ms == 0
    assert snapshot.quality is QualityTier.EXCELLENT
    assert snapshot.connected is False


def test_latency_snapshot_is_immutable() -> None:
    """Given a snapshot, when assigning a field, then validation fails."""
    snapshot = LatencySnapshot(round_trip_ms=42, connected=True)

    with pytest.raises(ValidationError):
        snapshot.round_trip_ms = 1  # type: ignore[misc]


def test_latency_snapshot_rejects_negative_values() -> None:
    with pytest.raises(ValidationError):
        LatencySnapshot(round_trip_ms=-1)
    with pytest.raises(ValidationError):
        LatencySnapshot(jitter_ms=-5)


def test_typing_event_uses_wire_names() -> None:
    """Given a wire payload, when validating, then camelCase fields map to attributes."""
    event = TypingEvent.model_validate({"participantId": "user-bob", "displayName": "Bob"})

    assert event.participant_id == "user-bob"
    assert event.display_name == "Bob"


def test_stop_typing_event_requires_participant() -> None:
    with pytest.raises(ValidationError):
        StopTypingEvent.model_validate({})


def test_stats_report_reads_webrtc_attribute_names() -> None:
    """Given a raw candidate-pair report, then RTT fields are populated from camelCase keys."""
    report = StatsReport.model_validate(
        {"type": "candidate-pair", "state": "succeeded", "currentRoundTripTime": 0.05, "id": "x"}
    )

    assert report.type == "candidate-pair"
    assert report.current_round_trip_time == 0.05
    assert report.round_trip_time is None


def test_participant_identity_requires_id() -> None:
    with pytest.raises(ValidationError):
        ParticipantIdentity(participant_id="", display_name="Nobody")


def test_push_to_talk_settings_defaults() -> None:
    settings = PushToTalkSettings()

    assert settings.enabled is False
    assert settings.key == " "


def test_input_gate_state_equality() -> None:
    assert InputGateState(bound_key=" ", enabled=True, pushed=False) == InputGateState(
        bound_key=" ", enabled=True, pushed=False
    )
