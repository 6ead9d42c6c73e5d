"""Protocols for the pub/sub broadcast channel."""

from collections.abc import Callable
from typing import Any, Protocol

EventHandler = Callable[[dict[str, Any]], None]


class ChannelHandleProtocol(Protocol):
    """An active subscription to one coordination scope."""

    @property
    def scope(self) -> str:
        """The scope this handle is subscribed to."""
        ...

    def on(self, event: str, handler: EventHandler) -> None:
        """Register a handler for payloads of the named event."""
        ...

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        """Broadcast an event to every subscriber of the scope.

        Args:
            event: Event name, e.g. ``"typing"``.
            payload: JSON-serialisable event payload.
        """
        ...


class BroadcastChannelProtocol(Protocol):
    """Factory for scope subscriptions."""

    async def subscribe(self, scope: str) -> ChannelHandleProtocol:
        """Subscribe to a scope and return its handle."""
        ...

    async def unsubscribe(self, handle: ChannelHandleProtocol) -> None:
        """Tear down a subscription previously returned by ``subscribe``."""
        ...
