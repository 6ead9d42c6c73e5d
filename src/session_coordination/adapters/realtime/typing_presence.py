"""Typing presence broadcast engine."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from session_coordination.adapters.config.app_config import SessionConfig
from session_coordination.adapters.observers import ObserverList
from session_coordination.adapters.realtime.publish_throttle import PublishThrottle
from session_coordination.adapters.realtime.typing_tracker import TypingTracker
from session_coordination.adapters.scheduling.timers import OneShotTimer, PeriodicTask
from session_coordination.domain.models.presence_entry import (
    STOP_TYPING_EVENT,
    TYPING_EVENT,
    ParticipantIdentity,
    PresenceEntry,
    StopTypingEvent,
    TypingEvent,
)

if TYPE_CHECKING:
    from session_coordination.domain.contracts.broadcast_channel import (
        BroadcastChannelProtocol,
        ChannelHandleProtocol,
    )
    from session_coordination.domain.contracts.identity_provider import (
        IdentityProviderProtocol,
    )

logger = logging.getLogger(__name__)


class TypingPresenceEngine:
    """Publishes local typing state and tracks remote typers for one scope.

    Outbound, ``start_typing`` is throttled and arms an auto-stop timer so a
    typing indicator never outlives the keystrokes behind it. Inbound, remote
    entries disappear on an explicit stop-typing or once they exceed the TTL,
    whichever comes first. The local participant is never tracked.
    """

    def __init__(
        self,
        channel: BroadcastChannelProtocol,
        identity_provider: IdentityProviderProtocol,
        config: SessionConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the engine.

        Args:
            channel: Pub/sub channel factory.
            identity_provider: Source of the local participant.
            config: Timing configuration (defaults when omitted).
            clock: Monotonic clock returning seconds.
        """
        self.config = config or SessionConfig()
        self._channel = channel
        self._identity_provider = identity_provider
        self._clock = clock
        self._tracker = TypingTracker(ttl_ms=self.config.typing_ttl_ms)
        self._throttle = PublishThrottle(
            "typing broadcast", self.config.typing_throttle_ms, clock=clock
        )
        self._auto_stop = OneShotTimer(
            "typing auto-stop", self.config.typing_auto_stop_ms / 1000, self.stop_typing
        )
        self._sweeper = PeriodicTask(
            "typing sweep", self.config.typing_sweep_interval_ms / 1000, self._sweep
        )
        self._observers = ObserverList("typing presence")
        self._handle: ChannelHandleProtocol | None = None
        self._identity: ParticipantIdentity | None = None
        self._scope_id: str | None = None
        self._bind_lock = asyncio.Lock()
        self._typing_lock = asyncio.Lock()

    @property
    def scope_id(self) -> str | None:
        return self._scope_id

    @property
    def is_subscribed(self) -> bool:
        return self._handle is not None

    @property
    def typing_participants(self) -> list[str]:
        """Display names of remote participants currently typing."""
        return self._tracker.display_names()

    @property
    def is_typing(self) -> bool:
        """Whether any remote participant is typing."""
        return len(self._tracker) > 0

    @property
    def entries(self) -> list[PresenceEntry]:
        return self._tracker.entries()

    def subscribe(self, listener: Callable[[list[str]], None]) -> Callable[[], None]:
        """Register a listener called with the participant list after each change."""
        return self._observers.subscribe(listener)

    async def bind(self, scope_id: str | None) -> None:
        """Attach the engine to a scope for the current identity.

        Re-reads the identity. If the (identity, scope) pair changed, the old
        subscription is torn down and received presence is cleared before the
        new subscription is established. Without identity or scope the engine
        stays detached. Overlapping calls are applied one after another.
        """
        async with self._bind_lock:
            identity = self._identity_provider.get_identity()
            if identity == self._identity and scope_id == self._scope_id:
                if self._handle is not None or identity is None or not scope_id:
                    return

            await self._teardown()
            self._identity = identity
            self._scope_id = scope_id

            if identity is None or not scope_id:
                logger.debug("Typing presence detached (no identity or scope)")
                return

            try:
                handle = await self._channel.subscribe(scope_id)
            except Exception as e:
                logger.error(f"Failed to subscribe to scope '{scope_id}': {e}", exc_info=True)
                return
            handle.on(TYPING_EVENT, lambda payload: self._on_typing(handle, payload))
            handle.on(STOP_TYPING_EVENT, lambda payload: self._on_stop_typing(handle, payload))
            self._handle = handle
            self._sweeper.start()
            logger.info(
                f"Typing presence bound to scope '{scope_id}' as {identity.participant_id}"
            )

    async def close(self) -> None:
        """Tear down the subscription and all timers."""
        async with self._bind_lock:
            await self._teardown()
            self._identity = None
            self._scope_id = None

    async def start_typing(self) -> None:
        """Signal a local keystroke.

        The throttle check and the publish run under one lock, so keystrokes
        arriving while a broadcast is in flight count against that broadcast.
        """
        async with self._typing_lock:
            if self._identity is None or self._handle is None:
                return

            if not self._throttle.ready():
                if self._auto_stop.pending:
                    self._auto_stop.arm()
                return

            payload = {
                "participantId": self._identity.participant_id,
                "displayName": self._identity.display_name,
            }
            if await self._publish(TYPING_EVENT, payload):
                self._throttle.record()
                self._auto_stop.arm()

    async def stop_typing(self) -> None:
        """Signal that local typing stopped."""
        if self._identity is None or self._handle is None:
            return

        self._auto_stop.cancel()
        self._throttle.reset()
        await self._publish(STOP_TYPING_EVENT, {"participantId": self._identity.participant_id})

    async def _publish(self, event: str, payload: dict[str, Any]) -> bool:
        handle = self._handle
        if handle is None:
            return False
        try:
            await handle.send(event, payload)
        except Exception as e:
            logger.error(f"Failed to publish '{event}' on scope '{handle.scope}': {e}", exc_info=True)
            return False
        logger.debug(f"Published '{event}' on scope '{handle.scope}'")
        return True

    async def _teardown(self) -> None:
        handle = self._handle
        if handle is None:
            return
        if self._auto_stop.pending:
            await self.stop_typing()
        self._auto_stop.cancel()
        self._throttle.reset()
        self._handle = None
        await self._sweeper.stop()
        try:
            await self._channel.unsubscribe(handle)
        except Exception as e:
            logger.error(f"Failed to unsubscribe from scope '{handle.scope}': {e}", exc_info=True)
        if self._tracker.clear():
            self._notify()
        logger.info(f"Typing presence released scope '{handle.scope}'")

    def _is_self(self, participant_id: str) -> bool:
        return self._identity is not None and participant_id == self._identity.participant_id

    def _on_typing(self, handle: ChannelHandleProtocol, payload: dict[str, Any]) -> None:
        if handle is not self._handle:
            return
        try:
            event = TypingEvent.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Dropping malformed typing payload {payload!r}: {e}")
            return
        if self._is_self(event.participant_id):
            return
        if self._tracker.touch(event.participant_id, event.display_name, self._now_ms()):
            logger.debug(f"{event.participant_id} started typing in scope '{handle.scope}'")
        self._notify()

    def _on_stop_typing(self, handle: ChannelHandleProtocol, payload: dict[str, Any]) -> None:
        if handle is not self._handle:
            return
        try:
            event = StopTypingEvent.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Dropping malformed stop-typing payload {payload!r}: {e}")
            return
        if self._is_self(event.participant_id):
            return
        if self._tracker.remove(event.participant_id):
            self._notify()

    async def _sweep(self) -> None:
        if self._tracker.evict_stale(self._now_ms()):
            self._notify()

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def _notify(self) -> None:
        self._observers.notify(self.typing_participants)
