"""Adapters layer - asyncio-bound implementations and collaborator integrations."""

from session_coordination.adapters.config import PushToTalkSettingsService, SessionConfig
from session_coordination.adapters.identity import StaticIdentityProvider
from session_coordination.adapters.storage import InMemorySettingsStore, JsonFileSettingsStore

__all__ = [
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "PushToTalkSettingsService",
    "SessionConfig",
    "StaticIdentityProvider",
]
