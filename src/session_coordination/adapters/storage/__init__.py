"""Settings storage adapters."""

from session_coordination.adapters.storage.settings_store import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
)

__all__ = ["InMemorySettingsStore", "JsonFileSettingsStore"]
