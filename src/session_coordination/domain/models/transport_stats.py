"""Transport statistics report model."""

from pydantic import BaseModel, ConfigDict, Field

CANDIDATE_PAIR = "candidate-pair"
REMOTE_INBOUND_RTP = "remote-inbound-rtp"


class StatsReport(BaseModel):
    """A single entry of a transport stats snapshot.

    Only the fields used for round-trip extraction are modelled. Accepts both
    WebRTC attribute names (``currentRoundTripTime``) and snake_case.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, from_attributes=True, extra="ignore"
    )

    type: str
    state: str | None = None
    kind: str | None = None
    current_round_trip_time: float | None = Field(default=None, alias="currentRoundTripTime")
    round_trip_time: float | None = Field(default=None, alias="roundTripTime")
