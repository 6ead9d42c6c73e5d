"""Key capture mode for choosing the push-to-talk key."""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from session_coordination.domain.contracts.push_to_talk_settings import (
        PushToTalkSettingsProtocol,
    )
    from session_coordination.domain.models.input_gate import KeyEvent

logger = logging.getLogger(__name__)

NAMED_KEYS = frozenset({" ", "Control", "Alt", "Shift", "Tab", "`", "CapsLock"})

_DISPLAY_NAMES = {
    " ": "Space",
    "Control": "Ctrl",
    "Alt": "Alt",
    "Shift": "Shift",
    "Tab": "Tab",
    "`": "`",
    "CapsLock": "Caps Lock",
}


def is_bindable_key(key: str) -> bool:
    """Whether a key may be bound as the push-to-talk key."""
    if key in NAMED_KEYS:
        return True
    return len(key) == 1 and (key.lower() in string.ascii_lowercase or key in string.digits)


def get_key_display_name(key: str) -> str:
    """Human-readable label for a bound key."""
    return _DISPLAY_NAMES.get(key, key.upper())


class KeyCapture:
    """Captures the next allowed key-down as the new push-to-talk binding."""

    def __init__(self, settings: PushToTalkSettingsProtocol) -> None:
        """Initialize key capture.

        Args:
            settings: Settings service the captured key is persisted to.
        """
        self._settings = settings
        self._capturing = False
        self._captured_key: str | None = None

    @property
    def is_capturing(self) -> bool:
        return self._capturing

    @property
    def captured_key(self) -> str | None:
        return self._captured_key

    def start_capture(self) -> bool:
        """Open a capture session.

        Returns:
            False if a session is already open.
        """
        if self._capturing:
            logger.warning("Key capture already in progress")
            return False
        self._capturing = True
        self._captured_key = None
        return True

    def cancel_capture(self) -> None:
        """Close the capture session without binding anything."""
        self._capturing = False
        self._captured_key = None

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Offer a key-down to the capture session.

        Args:
            event: The keyboard event.

        Returns:
            True if the event was consumed by an open capture session.
        """
        if not self._capturing:
            return False

        if not is_bindable_key(event.key):
            logger.debug(f"Ignoring non-bindable key {event.key!r} during capture")
            return True

        self._settings.set_key(event.key)
        self._captured_key = event.key
        self._capturing = False
        logger.info(f"Captured push-to-talk key {get_key_display_name(event.key)!r}")
        return True
