"""Connection quality domain models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class QualityTier(StrEnum):
    """Discrete connection quality tiers, best first."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class QualityThresholds(BaseModel):
    """Inclusive upper round-trip bounds (ms) for each tier above POOR."""

    model_config = ConfigDict(frozen=True)

    excellent_ms: float
    good_ms: float
    fair_ms: float


class LatencySnapshot(BaseModel):
    """Latest connection quality sample.

    Replaced wholesale on every poll tick; values are already rounded to whole
    milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    round_trip_ms: int = Field(default=0, ge=0)
    jitter_ms: int = Field(default=0, ge=0)
    quality: QualityTier = QualityTier.EXCELLENT
    connected: bool = False
