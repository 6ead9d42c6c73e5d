"""Latency pollers."""

from session_coordination.adapters.pollers.connection_quality_monitor import (
    ConnectionQualityMonitor,
)
from session_coordination.adapters.pollers.http_latency_probe import HttpLatencyProbe
from session_coordination.adapters.pollers.transport_stats import (
    extract_round_trip_ms,
    parse_stats_reports,
)

__all__ = [
    "ConnectionQualityMonitor",
    "HttpLatencyProbe",
    "extract_round_trip_ms",
    "parse_stats_reports",
]
