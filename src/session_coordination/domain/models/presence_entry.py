"""Typing presence domain models."""

from pydantic import BaseModel, ConfigDict, Field

TYPING_EVENT = "typing"
STOP_TYPING_EVENT = "stop-typing"


class ParticipantIdentity(BaseModel):
    """The local user as supplied by the identity provider."""

    model_config = ConfigDict(frozen=True)

    participant_id: str = Field(min_length=1)
    display_name: str


class PresenceEntry(BaseModel):
    """A remote participant currently seen typing."""

    model_config = ConfigDict(frozen=True)

    participant_id: str
    display_name: str
    last_seen_at_ms: float


class TypingEvent(BaseModel):
    """Payload of a ``typing`` broadcast."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    participant_id: str = Field(alias="participantId", min_length=1)
    display_name: str = Field(alias="displayName")


class StopTypingEvent(BaseModel):
    """Payload of a ``stop-typing`` broadcast."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    participant_id: str = Field(alias="participantId", min_length=1)
