"""Connection quality monitor polling transport statistics."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from session_coordination.adapters.config.app_config import SessionConfig
from session_coordination.adapters.observers import ObserverList
from session_coordination.adapters.pollers.transport_stats import (
    extract_round_trip_ms,
    parse_stats_reports,
)
from session_coordination.adapters.scheduling.timers import PeriodicTask
from session_coordination.application.services.quality_classifier import (
    classify_quality,
    round_half_away_from_zero,
)
from session_coordination.domain.contracts.latency_monitor import LatencyMonitorProtocol
from session_coordination.domain.models.latency_snapshot import LatencySnapshot

if TYPE_CHECKING:
    from session_coordination.domain.contracts.transport_handle import TransportHandleProtocol

logger = logging.getLogger(__name__)

CONNECTED_STATE = "connected"


class ConnectionQualityMonitor(LatencyMonitorProtocol):
    """Samples round-trip time and jitter from a live transport.

    Sampling runs once immediately on activation and then on a fixed period,
    for as long as the monitor is started, enabled and has a transport.
    """

    def __init__(
        self,
        transport: TransportHandleProtocol | None = None,
        config: SessionConfig | None = None,
        enabled: bool = True,
    ) -> None:
        """Initialize the monitor.

        Args:
            transport: Live transport handle, if one exists yet.
            config: Configuration providing the poll interval.
            enabled: Whether sampling is wanted at all.
        """
        self.config = config or SessionConfig()
        self._transport = transport
        self._enabled = enabled
        self._started = False
        self._snapshot = LatencySnapshot()
        self._previous_rtt_ms: float | None = None
        self._observers = ObserverList("connection quality")
        self._poller = PeriodicTask(
            "connection quality",
            self.config.latency_poll_interval_ms / 1000,
            self._tick,
            run_immediately=True,
        )

    @property
    def snapshot(self) -> LatencySnapshot:
        return self._snapshot

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def running(self) -> bool:
        return self._poller.running

    def subscribe(self, listener: Callable[[LatencySnapshot], None]) -> Callable[[], None]:
        """Register a listener called with every newly published snapshot."""
        return self._observers.subscribe(listener)

    async def start(self) -> None:
        """Start monitoring; sampling begins once enabled with a transport."""
        self._started = True
        await self._reconcile()

    async def stop(self) -> None:
        """Stop monitoring and cancel the poll timer."""
        self._started = False
        await self._poller.stop()

    async def set_enabled(self, enabled: bool) -> None:
        if enabled == self._enabled:
            return
        self._enabled = enabled
        await self._reconcile()

    async def set_transport(self, transport: TransportHandleProtocol | None) -> None:
        """Swap the transport handle; a new handle restarts sampling from scratch."""
        if transport is self._transport:
            return
        self._transport = transport
        await self._poller.stop()
        if transport is None:
            self._publish(self._snapshot.model_copy(update={"connected": False}))
        await self._reconcile()

    async def sample(self) -> LatencySnapshot:
        """Take one measurement and publish it.

        Never raises: a failed stats fetch keeps the previous snapshot.
        """
        transport = self._transport
        if transport is None or transport.connection_state != CONNECTED_STATE:
            self._publish(self._snapshot.model_copy(update={"connected": False}))
            return self._snapshot

        try:
            stats = await transport.get_stats()
            round_trip_ms = extract_round_trip_ms(parse_stats_reports(stats))
        except Exception as e:
            logger.error(f"Failed to measure connection latency: {e}", exc_info=True)
            return self._snapshot

        if round_trip_ms is None:
            logger.debug("No round-trip time in stats snapshot, reporting 0ms")
            round_trip_ms = 0.0

        jitter_ms = (
            abs(round_trip_ms - self._previous_rtt_ms) if self._previous_rtt_ms is not None else 0.0
        )
        self._previous_rtt_ms = round_trip_ms

        self._publish(
            LatencySnapshot(
                round_trip_ms=round_half_away_from_zero(round_trip_ms),
                jitter_ms=round_half_away_from_zero(jitter_ms),
                quality=classify_quality(round_trip_ms),
                connected=True,
            )
        )
        return self._snapshot

    async def _reconcile(self) -> None:
        should_run = self._started and self._enabled and self._transport is not None
        if should_run and not self._poller.running:
            self._previous_rtt_ms = None
            self._poller.start()
        elif not should_run and self._poller.running:
            await self._poller.stop()

    async def _tick(self) -> None:
        snapshot = await self.sample()
        logger.debug(
            f"Connection quality: {snapshot.round_trip_ms}ms, jitter {snapshot.jitter_ms}ms, "
            f"{snapshot.quality}, connected={snapshot.connected}"
        )

    def _publish(self, snapshot: LatencySnapshot) -> None:
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        self._observers.notify(snapshot)
