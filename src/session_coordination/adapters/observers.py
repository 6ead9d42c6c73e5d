"""Local observer lists for change notification."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class ObserverList:
    """Ordered set of listeners notified synchronously, in subscription order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Callable[..., None]] = []

    def subscribe(self, listener: Callable[..., None]) -> Callable[[], None]:
        """Add a listener.

        Returns:
            A callable that removes the listener again (safe to call twice).
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, *args: Any) -> None:
        """Call every listener; a failing listener does not stop the others."""
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception as e:
                logger.error(f"{self.name} listener failed: {e}", exc_info=True)

    def __len__(self) -> int:
        return len(self._listeners)
