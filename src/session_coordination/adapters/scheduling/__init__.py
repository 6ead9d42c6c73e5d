"""Timer primitives."""

from session_coordination.adapters.scheduling.timers import OneShotTimer, PeriodicTask

__all__ = ["OneShotTimer", "PeriodicTask"]
