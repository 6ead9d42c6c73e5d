"""Transport handle contract (protocol)."""

from typing import Any, Protocol


class TransportHandleProtocol(Protocol):
    """A live media transport exposing its connection phase and stats."""

    @property
    def connection_state(self) -> str:
        """Current connection phase, e.g. ``"connecting"`` or ``"connected"``."""
        ...

    async def get_stats(self) -> Any:
        """Fetch a stats snapshot.

        Returns:
            A mapping of report id to report, or an iterable of reports. Each
            report is a mapping or an object carrying WebRTC stats attributes.
        """
        ...
