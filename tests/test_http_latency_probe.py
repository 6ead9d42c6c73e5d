"""Tests for the HTTP latency estimator."""

import asyncio
from unittest.mock import MagicMock, patch

import aiohttp
import pytest

from session_coordination.adapters.config import SessionConfig
from session_coordination.adapters.pollers import HttpLatencyProbe
from session_coordination.domain.models import LatencySnapshot, QualityTier

PROBE_MODULE = "session_coordination.adapters.pollers.http_latency_probe"


def _mock_session() -> MagicMock:
    session = MagicMock()
    session.head.return_value = MagicMock()
    return session


def test_requires_url() -> None:
    """Given neither url nor config url, then construction fails."""
    with pytest.raises(ValueError, match="url"):
        HttpLatencyProbe(_mock_session(), config=SessionConfig(latency_probe_url=None))


@pytest.mark.asyncio
async def test_estimates_scaled_latency() -> None:
    """Given a 200ms HTTP round trip, when measuring, then 80ms FAIR is reported."""
    session = _mock_session()
    probe = HttpLatencyProbe(session, url="https://backend.example/health")

    with patch(f"{PROBE_MODULE}.time") as mock_time:
        mock_time.monotonic.side_effect = [10.0, 10.2]
        snapshot = await probe.measure()

    assert snapshot == LatencySnapshot(
        round_trip_ms=80, jitter_ms=0, quality=QualityTier.FAIR, connected=True
    )
    session.head.assert_called_once()
    assert session.head.call_args.args[0] == "https://backend.example/health"


@pytest.mark.asyncio
async def test_estimate_is_at_least_one_ms() -> None:
    """Given an instantaneous response, then the estimate is clamped to 1ms."""
    probe = HttpLatencyProbe(_mock_session(), url="https://backend.example/health")

    with patch(f"{PROBE_MODULE}.time") as mock_time:
        mock_time.monotonic.side_effect = [5.0, 5.0]
        snapshot = await probe.measure()

    assert snapshot.round_trip_ms == 1
    assert snapshot.quality is QualityTier.EXCELLENT


@pytest.mark.asyncio
async def test_sends_api_key_header() -> None:
    """Given a configured API key, then it is sent as the apikey header."""
    session = _mock_session()
    config = SessionConfig(
        latency_probe_url="https://backend.example/health", latency_probe_api_key="secret"
    )
    probe = HttpLatencyProbe(session, config=config)

    await probe.measure()

    assert session.head.call_args.kwargs["headers"] == {"apikey": "secret"}


@pytest.mark.asyncio
async def test_failure_reports_unreachable() -> None:
    """Given a failing request, when measuring, then 999ms POOR disconnected is reported."""
    session = _mock_session()
    session.head.side_effect = aiohttp.ClientConnectionError("refused")
    probe = HttpLatencyProbe(session, url="https://backend.example/health")

    snapshot = await probe.measure()

    assert snapshot == LatencySnapshot(
        round_trip_ms=999, jitter_ms=0, quality=QualityTier.POOR, connected=False
    )


@pytest.mark.asyncio
async def test_start_probes_immediately_until_stopped() -> None:
    """Given a started probe, then it measures at once and stops cleanly."""
    session = _mock_session()
    config = SessionConfig(
        latency_probe_url="https://backend.example/health", latency_probe_interval_ms=20
    )
    probe = HttpLatencyProbe(session, config=config)
    received: list[LatencySnapshot] = []
    probe.subscribe(received.append)

    await probe.start()
    await asyncio.sleep(0.05)
    await probe.stop()
    calls_after_stop = session.head.call_count
    await asyncio.sleep(0.03)

    assert calls_after_stop >= 2
    assert session.head.call_count == calls_after_stop
    assert received and received[0].connected is True
