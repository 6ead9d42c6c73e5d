"""Configuration adapters."""

from session_coordination.adapters.config.app_config import SessionConfig
from session_coordination.adapters.config.push_to_talk_settings import (
    PTT_ENABLED_KEY,
    PTT_KEY_KEY,
    PushToTalkSettingsService,
)

__all__ = ["PTT_ENABLED_KEY", "PTT_KEY_KEY", "PushToTalkSettingsService", "SessionConfig"]
