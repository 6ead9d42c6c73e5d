"""Round-trip time to quality tier classification."""

import math

from session_coordination.domain.models.latency_snapshot import QualityThresholds, QualityTier

STANDARD_THRESHOLDS = QualityThresholds(excellent_ms=50, good_ms=100, fair_ms=200)

# The HTTP estimator reports a scaled-down figure, so its bands are tighter.
ESTIMATED_THRESHOLDS = QualityThresholds(excellent_ms=30, good_ms=60, fair_ms=100)


def classify_quality(
    round_trip_ms: float, thresholds: QualityThresholds = STANDARD_THRESHOLDS
) -> QualityTier:
    """Map a round-trip time to a quality tier.

    Boundaries are inclusive: with the standard thresholds 50 ms is EXCELLENT
    and 51 ms is GOOD.

    Args:
        round_trip_ms: Unrounded round-trip time in milliseconds.
        thresholds: Tier boundaries to apply.

    Returns:
        The matching quality tier.
    """
    if round_trip_ms <= thresholds.excellent_ms:
        return QualityTier.EXCELLENT
    if round_trip_ms <= thresholds.good_ms:
        return QualityTier.GOOD
    if round_trip_ms <= thresholds.fair_ms:
        return QualityTier.FAIR
    return QualityTier.POOR


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
