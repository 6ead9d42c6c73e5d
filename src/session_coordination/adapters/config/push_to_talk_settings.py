"""Push-to-talk settings service with local change notification."""

from __future__ import annotations

import logging
from collections.abc import Callable

from session_coordination.adapters.observers import ObserverList
from session_coordination.domain.contracts.push_to_talk_settings import (
    PushToTalkSettingsProtocol,
)
from session_coordination.domain.contracts.settings_store import (
    SettingsStoreProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from session_coordination.domain.models.input_gate import DEFAULT_PTT_KEY, PushToTalkSettings

logger = logging.getLogger(__name__)

PTT_ENABLED_KEY = "pushToTalkEnabled"
PTT_KEY_KEY = "pushToTalkKey"


class PushToTalkSettingsService(PushToTalkSettingsProtocol):
    """Reads and writes push-to-talk settings and notifies subscribers of changes.

    Every arbiter holds a reference to one shared service instead of reading
    globals; subscribers are told *that* something changed and re-read.
    """

    def __init__(self, store: SettingsStoreProtocol) -> None:
        """Initialize the service.

        Args:
            store: Persistent key/value store backing the settings.
        """
        self._store = store
        self._observers = ObserverList("push-to-talk settings")

    def get(self) -> PushToTalkSettings:
        """Read the current settings, falling back to defaults."""
        enabled = self._store.get(PTT_ENABLED_KEY) == "true"
        key = self._store.get(PTT_KEY_KEY) or DEFAULT_PTT_KEY
        return PushToTalkSettings(enabled=enabled, key=key)

    def set(self, settings: PushToTalkSettings) -> None:
        """Replace both settings at once."""
        if settings == self.get():
            return
        self._store.set(PTT_ENABLED_KEY, "true" if settings.enabled else "false")
        self._store.set(PTT_KEY_KEY, settings.key)
        logger.info(f"Push-to-talk settings changed: enabled={settings.enabled}, key={settings.key!r}")
        self._observers.notify()

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable push-to-talk."""
        self.set(self.get().model_copy(update={"enabled": enabled}))

    def set_key(self, key: str) -> None:
        """Bind a new key.

        Raises:
            ValueError: If the key is empty.
        """
        self.set(PushToTalkSettings(enabled=self.get().enabled, key=key))

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a change listener; returns its unsubscribe callable."""
        return self._observers.subscribe(listener)
