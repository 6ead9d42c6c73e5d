"""Approximate latency estimation from HTTP round trips.

Fallback for when no transport statistics are available. The HTTP round trip
to the backend is scaled down to approximate peer-to-peer voice latency, so the
figure is a rough heuristic rather than a measurement.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import aiohttp

from session_coordination.adapters.config.app_config import SessionConfig
from session_coordination.adapters.observers import ObserverList
from session_coordination.adapters.scheduling.timers import PeriodicTask
from session_coordination.application.services.quality_classifier import (
    ESTIMATED_THRESHOLDS,
    classify_quality,
    round_half_away_from_zero,
)
from session_coordination.domain.contracts.latency_monitor import LatencyMonitorProtocol
from session_coordination.domain.models.latency_snapshot import LatencySnapshot, QualityTier

logger = logging.getLogger(__name__)

UNREACHABLE_LATENCY_MS = 999


class HttpLatencyProbe(LatencyMonitorProtocol):
    """Periodically estimates latency with HEAD requests."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url: str | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            session: Shared aiohttp session.
            url: URL to probe; defaults to ``config.latency_probe_url``.
            config: Probe interval, scale, timeout and API key.

        Raises:
            ValueError: If no URL is given or configured.
        """
        self.config = config or SessionConfig()
        self.url = url or self.config.latency_probe_url
        if not self.url:
            raise ValueError("HttpLatencyProbe needs a url or latency_probe_url to be set")
        self._session = session
        self._snapshot = LatencySnapshot()
        self._observers = ObserverList("http latency")
        self._poller = PeriodicTask(
            "http latency probe",
            self.config.latency_probe_interval_ms / 1000,
            self._tick,
            run_immediately=True,
        )

    @property
    def snapshot(self) -> LatencySnapshot:
        return self._snapshot

    def subscribe(self, listener: Callable[[LatencySnapshot], None]) -> Callable[[], None]:
        return self._observers.subscribe(listener)

    async def start(self) -> None:
        self._poller.start()

    async def stop(self) -> None:
        await self._poller.stop()

    async def measure(self) -> LatencySnapshot:
        """Probe once and publish the estimate. Never raises."""
        headers = {}
        if self.config.latency_probe_api_key:
            headers["apikey"] = self.config.latency_probe_api_key
        timeout = aiohttp.ClientTimeout(total=self.config.latency_probe_timeout_seconds)

        start = time.monotonic()
        try:
            async with self._session.head(self.url, headers=headers, timeout=timeout):
                pass
        except Exception as e:
            logger.warning(f"Latency probe to {self.url} failed: {e}")
            self._publish(
                LatencySnapshot(
                    round_trip_ms=UNREACHABLE_LATENCY_MS,
                    jitter_ms=0,
                    quality=QualityTier.POOR,
                    connected=False,
                )
            )
            return self._snapshot

        http_ms = (time.monotonic() - start) * 1000
        estimated_ms = max(1, round_half_away_from_zero(http_ms * self.config.latency_probe_scale))
        logger.debug(f"HTTP round trip {http_ms:.0f}ms, estimated voice latency {estimated_ms}ms")
        self._publish(
            LatencySnapshot(
                round_trip_ms=estimated_ms,
                jitter_ms=0,
                quality=classify_quality(estimated_ms, ESTIMATED_THRESHOLDS),
                connected=True,
            )
        )
        return self._snapshot

    async def _tick(self) -> None:
        await self.measure()

    def _publish(self, snapshot: LatencySnapshot) -> None:
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        self._observers.notify(snapshot)
