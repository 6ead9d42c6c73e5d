"""Minimum-interval gate for outgoing broadcasts."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class PublishThrottle:
    """Allows a publish only if enough time passed since the last recorded one.

    Unlike a blocking rate limiter, a throttled call is dropped rather than
    delayed.
    """

    def __init__(
        self,
        name: str,
        min_interval_ms: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the throttle.

        Args:
            name: Name used in log messages.
            min_interval_ms: Minimum time between recorded publishes.
            clock: Monotonic clock returning seconds.
        """
        self.name = name
        self.min_interval_ms = min_interval_ms
        self._clock = clock
        self._last_publish_ms: float | None = None

    def ready(self) -> bool:
        """Whether a publish is allowed now."""
        if self._last_publish_ms is None:
            return True
        elapsed_ms = self._clock() * 1000 - self._last_publish_ms
        if elapsed_ms < self.min_interval_ms:
            logger.debug(f"{self.name}: throttled, {elapsed_ms:.0f}ms since last publish")
            return False
        return True

    def record(self) -> None:
        """Record a successful publish at the current time."""
        self._last_publish_ms = self._clock() * 1000

    def reset(self) -> None:
        """Forget the last publish so the next call is allowed immediately."""
        self._last_publish_ms = None
