"""In-memory fakes for the session coordination collaborators."""

import asyncio
from typing import Any


class FakeClock:
    """Manually advanced monotonic clock (seconds), stepped in whole milliseconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self._now_ms = round(start * 1000)

    def __call__(self) -> float:
        return self._now_ms / 1000

    def advance_ms(self, ms: int) -> None:
        self._now_ms += ms


class FakeHub:
    """In-memory broadcast hub delivering synchronously to all live handles of a scope.

    With ``yield_control`` set, sends and subscribes suspend once before
    completing, so concurrent callers interleave.
    """

    def __init__(self) -> None:
        self.handles: list["FakeHandle"] = []
        self.sent: list[tuple[str, str, dict[str, Any]]] = []
        self.yield_control = False

    def events(self, event: str) -> list[dict[str, Any]]:
        return [payload for _, name, payload in self.sent if name == event]


class FakeHandle:
    """Subscription handle on a FakeHub."""

    def __init__(self, hub: FakeHub, scope: str) -> None:
        self.hub = hub
        self._scope = scope
        self.handlers: dict[str, list] = {}
        self.fail_sends = False

    @property
    def scope(self) -> str:
        return self._scope

    def on(self, event: str, handler) -> None:
        self.handlers.setdefault(event, []).append(handler)

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        if self.fail_sends:
            raise ConnectionError("channel closed")
        if self.hub.yield_control:
            await asyncio.sleep(0)
        self.hub.sent.append((self._scope, event, payload))
        for handle in list(self.hub.handles):
            if handle.scope == self._scope:
                handle.deliver(event, payload)

    def deliver(self, event: str, payload: dict[str, Any]) -> None:
        for handler in self.handlers.get(event, []):
            handler(payload)


class FakeChannel:
    """Broadcast channel creating FakeHandles on a shared hub."""

    def __init__(self, hub: FakeHub) -> None:
        self.hub = hub
        self.subscribed: list[str] = []
        self.unsubscribed: list[str] = []

    async def subscribe(self, scope: str) -> FakeHandle:
        if self.hub.yield_control:
            await asyncio.sleep(0)
        handle = FakeHandle(self.hub, scope)
        self.hub.handles.append(handle)
        self.subscribed.append(scope)
        return handle

    async def unsubscribe(self, handle: FakeHandle) -> None:
        self.hub.handles.remove(handle)
        self.unsubscribed.append(handle.scope)


class FakeTransport:
    """Transport handle returning queued stats snapshots."""

    def __init__(self, connection_state: str = "connected") -> None:
        self.connection_state = connection_state
        self.snapshots: list[Any] = []
        self.calls = 0

    def queue_rtt(self, seconds: float) -> None:
        self.snapshots.append(
            {
                "RTCIceCandidatePair_1": {
                    "type": "candidate-pair",
                    "state": "succeeded",
                    "currentRoundTripTime": seconds,
                }
            }
        )

    async def get_stats(self) -> Any:
        self.calls += 1
        snapshot = self.snapshots.pop(0) if len(self.snapshots) > 1 else self.snapshots[0]
        if isinstance(snapshot, Exception):
            raise snapshot
        return snapshot
