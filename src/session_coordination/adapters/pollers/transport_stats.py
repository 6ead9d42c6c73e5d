"""Round-trip time extraction from transport stats snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from session_coordination.domain.models.transport_stats import (
    CANDIDATE_PAIR,
    REMOTE_INBOUND_RTP,
    StatsReport,
)

logger = logging.getLogger(__name__)


def parse_stats_reports(stats: Any) -> list[StatsReport]:
    """Normalise a stats snapshot into report models.

    Args:
        stats: Mapping of report id to report, or an iterable of reports. Each
            report is a mapping or an object with stats attributes.

    Returns:
        The reports that could be parsed, in snapshot order.
    """
    raw_reports: Iterable[Any] = stats.values() if isinstance(stats, Mapping) else stats
    reports: list[StatsReport] = []
    for raw in raw_reports:
        try:
            reports.append(StatsReport.model_validate(raw, from_attributes=True))
        except ValidationError as e:
            logger.debug(f"Skipping unparseable stats report: {e}")
    return reports


def extract_round_trip_ms(reports: Iterable[StatsReport]) -> float | None:
    """Pick the round-trip time of a snapshot, in milliseconds.

    A succeeded candidate pair's measured RTT is preferred; the audio
    remote-inbound RTT is the fallback.

    Returns:
        The unrounded RTT in milliseconds, or None if no report carries one.
    """
    fallback_seconds: float | None = None
    for report in reports:
        if (
            report.type == CANDIDATE_PAIR
            and report.state == "succeeded"
            and report.current_round_trip_time is not None
        ):
            return report.current_round_trip_time * 1000
        if (
            fallback_seconds is None
            and report.type == REMOTE_INBOUND_RTP
            and report.kind == "audio"
            and report.round_trip_time is not None
        ):
            fallback_seconds = report.round_trip_time
    return fallback_seconds * 1000 if fallback_seconds is not None else None
