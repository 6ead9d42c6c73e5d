"""Push-to-talk arbitration between raw key input and the session input gate."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from session_coordination.domain.models.input_gate import GatePhase, InputGateState

if TYPE_CHECKING:
    from session_coordination.domain.contracts.push_to_talk_settings import (
        PushToTalkSettingsProtocol,
    )
    from session_coordination.domain.models.input_gate import KeyEvent

logger = logging.getLogger(__name__)


class PushToTalkArbiter:
    """Two-state (IDLE/PUSHED) gate driven by a single bound key.

    Key-down on the bound key pushes, the matching key-up or a window blur
    releases. Each transition invokes its callback exactly once. Settings are
    re-read whenever the settings service signals a change.
    """

    def __init__(
        self,
        settings: PushToTalkSettingsProtocol,
        on_push: Callable[[], None] | None = None,
        on_release: Callable[[], None] | None = None,
        is_enabled: bool = True,
    ) -> None:
        """Initialize the arbiter and start observing settings changes.

        Args:
            settings: Process-wide push-to-talk settings service.
            on_push: Called on every IDLE -> PUSHED transition.
            on_release: Called on every PUSHED -> IDLE transition.
            is_enabled: Instance-level switch, e.g. only while in a voice call.
        """
        self._settings = settings
        self._on_push = on_push
        self._on_release = on_release
        self._active = is_enabled
        self._phase = GatePhase.IDLE
        self._window_focused = True
        current = settings.get()
        self._ptt_enabled = current.enabled
        self._key = current.key
        self._unsubscribe: Callable[[], None] | None = settings.subscribe(
            self._on_settings_changed
        )

    @property
    def phase(self) -> GatePhase:
        return self._phase

    @property
    def is_pushing(self) -> bool:
        return self._phase is GatePhase.PUSHED

    @property
    def state(self) -> InputGateState:
        return InputGateState(
            bound_key=self._key,
            enabled=self._ptt_enabled and self._active,
            pushed=self.is_pushing,
        )

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Handle a key-down.

        Returns:
            True if the event pushed the gate (the UI should suppress it).
        """
        if not (self._active and self._ptt_enabled and self._window_focused):
            return False
        if event.repeat or event.target_is_text_entry:
            return False
        if event.key != self._key or self._phase is GatePhase.PUSHED:
            return False

        self._transition(GatePhase.PUSHED)
        return True

    def handle_key_up(self, event: KeyEvent) -> bool:
        """Handle a key-up.

        Returns:
            True if the event released the gate.
        """
        if not (self._active and self._ptt_enabled):
            return False
        if event.key != self._key or self._phase is not GatePhase.PUSHED:
            return False

        self._transition(GatePhase.IDLE)
        return True

    def handle_blur(self) -> None:
        """Window lost focus: force a release while the key may still be held."""
        self._window_focused = False
        self._release_if_pushed("window blur")

    def handle_focus(self) -> None:
        """Window regained focus."""
        self._window_focused = True

    def set_active(self, active: bool) -> None:
        """Switch this instance on or off."""
        self._active = active
        if not active:
            self._release_if_pushed("arbiter deactivated")

    def close(self) -> None:
        """Stop observing settings and release the gate."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._release_if_pushed("arbiter closed")

    def _on_settings_changed(self) -> None:
        current = self._settings.get()
        rebound = current.key != self._key
        self._ptt_enabled = current.enabled
        self._key = current.key
        logger.debug(f"Push-to-talk settings re-read: enabled={current.enabled}, key={current.key!r}")
        if rebound or not current.enabled:
            self._release_if_pushed("settings changed")

    def _release_if_pushed(self, reason: str) -> None:
        if self._phase is GatePhase.PUSHED:
            logger.info(f"Forcing push-to-talk release: {reason}")
            self._transition(GatePhase.IDLE)

    def _transition(self, phase: GatePhase) -> None:
        self._phase = phase
        callback = self._on_push if phase is GatePhase.PUSHED else self._on_release
        if callback is None:
            return
        try:
            callback()
        except Exception as e:
            logger.error(f"Push-to-talk {phase} callback failed: {e}", exc_info=True)
