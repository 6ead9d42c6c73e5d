"""Broadcast channel backed by pyview's in-process PubSub hub."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

from session_coordination.domain.contracts.broadcast_channel import (
    BroadcastChannelProtocol,
    ChannelHandleProtocol,
    EventHandler,
)

logger = logging.getLogger(__name__)


class PyViewChannelHandle(ChannelHandleProtocol):
    """Subscription of one client instance to one scope topic."""

    def __init__(self, scope: str, topic: str, pubsub: PubSub) -> None:
        self._scope = scope
        self.topic = topic
        self._pubsub = pubsub
        self._handlers: dict[str, list[EventHandler]] = {}

    @property
    def scope(self) -> str:
        return self._scope

    def on(self, event: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        await self._pubsub.send_all_on_topic_async(
            self.topic, {"event": event, "payload": payload}
        )

    async def detach(self) -> None:
        """Stop receiving messages for this topic."""
        await self._pubsub.unsubscribe_topic_async(self.topic)
        self._handlers.clear()

    async def dispatch(self, topic: str, message: Any) -> None:
        """Deliver a hub message to the handlers registered for its event."""
        if not isinstance(message, dict) or "event" not in message:
            logger.warning(f"Ignoring malformed message on topic {topic}: {message!r}")
            return
        payload = message.get("payload") or {}
        for handler in list(self._handlers.get(message["event"], [])):
            try:
                handler(payload)
            except Exception as e:
                logger.error(
                    f"Handler for '{message['event']}' on topic {topic} failed: {e}",
                    exc_info=True,
                )


class PyViewBroadcastChannel(BroadcastChannelProtocol):
    """Creates per-scope subscriptions on the pyview PubSub hub."""

    def __init__(self, topic_prefix: str = "typing", hub: Any = None) -> None:
        """Initialize the channel.

        Args:
            topic_prefix: Prefix of the topic derived from each scope id.
            hub: PubSub hub to use (pyview's process-wide hub by default).
        """
        self.topic_prefix = topic_prefix
        self._hub = hub if hub is not None else pub_sub_hub

    def topic_for(self, scope: str) -> str:
        return f"{self.topic_prefix}:{scope}"

    async def subscribe(self, scope: str) -> PyViewChannelHandle:
        topic = self.topic_for(scope)
        # A session id per handle keeps concurrent subscriptions independent.
        pubsub = PubSub(self._hub, f"session:{uuid.uuid4()}")
        handle = PyViewChannelHandle(scope, topic, pubsub)
        await pubsub.subscribe_topic_async(topic, handle.dispatch)
        logger.info(f"Subscribed to topic {topic}")
        return handle

    async def unsubscribe(self, handle: ChannelHandleProtocol) -> None:
        if not isinstance(handle, PyViewChannelHandle):
            raise TypeError("handle was not created by this channel")
        await handle.detach()
        logger.info(f"Unsubscribed from topic {handle.topic}")
