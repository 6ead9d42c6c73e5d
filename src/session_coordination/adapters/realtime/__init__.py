"""Realtime presence adapters."""

from session_coordination.adapters.realtime.publish_throttle import PublishThrottle
from session_coordination.adapters.realtime.typing_presence import TypingPresenceEngine
from session_coordination.adapters.realtime.typing_tracker import TypingTracker

__all__ = ["PublishThrottle", "TypingPresenceEngine", "TypingTracker"]
