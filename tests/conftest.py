"""Shared fixtures for session coordination tests."""

import pytest

from session_coordination.adapters.config import PushToTalkSettingsService, SessionConfig
from session_coordination.adapters.identity import StaticIdentityProvider
from session_coordination.adapters.storage import InMemorySettingsStore
from session_coordination.domain.models import ParticipantIdentity
from tests.fakes import FakeClock, FakeHub


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def hub() -> FakeHub:
    return FakeHub()


@pytest.fixture
def alice() -> ParticipantIdentity:
    return ParticipantIdentity(participant_id="user-alice", display_name="Alice")


@pytest.fixture
def bob() -> ParticipantIdentity:
    return ParticipantIdentity(participant_id="user-bob", display_name="Bob")


@pytest.fixture
def identity_provider(alice: ParticipantIdentity) -> StaticIdentityProvider:
    return StaticIdentityProvider(alice)


@pytest.fixture
def fast_config() -> SessionConfig:
    """Config with short timers so scheduling tests finish quickly."""
    return SessionConfig(
        latency_poll_interval_ms=20,
        typing_ttl_ms=3000,
        typing_sweep_interval_ms=10,
        typing_throttle_ms=1000,
        typing_auto_stop_ms=3000,
    )


@pytest.fixture
def ptt_settings() -> PushToTalkSettingsService:
    return PushToTalkSettingsService(InMemorySettingsStore())
