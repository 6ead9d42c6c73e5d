"""Protocol for the push-to-talk configuration service."""

from collections.abc import Callable
from typing import Protocol

from session_coordination.domain.models.input_gate import PushToTalkSettings


class PushToTalkSettingsProtocol(Protocol):
    """Process-wide push-to-talk settings with change notification."""

    def get(self) -> PushToTalkSettings:
        """Read the current settings."""
        ...

    def set_key(self, key: str) -> None:
        """Bind a new key."""
        ...

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable push-to-talk."""
        ...

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener.
        """
        ...
