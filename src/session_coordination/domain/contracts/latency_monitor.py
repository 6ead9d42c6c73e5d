"""Protocol for latency monitors."""

from collections.abc import Callable
from typing import Protocol

from session_coordination.domain.models.latency_snapshot import LatencySnapshot


class LatencyMonitorProtocol(Protocol):
    """Periodically samples connection latency."""

    @property
    def snapshot(self) -> LatencySnapshot:
        """The latest published sample."""
        ...

    async def start(self) -> None:
        """Start sampling."""
        ...

    async def stop(self) -> None:
        """Stop sampling."""
        ...

    def subscribe(self, listener: Callable[[LatencySnapshot], None]) -> Callable[[], None]:
        """Register a listener for new snapshots."""
        ...
