"""Protocol for persistent key/value settings."""

from typing import Protocol


class SettingsStoreProtocol(Protocol):
    """String key/value store that survives restarts."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        ...
