"""Cancellable asyncio timers owned by a single component."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

AsyncCallback = Callable[[], Awaitable[None]]


class OneShotTimer:
    """Runs a callback once after a delay.

    Re-arming cancels the pending run before scheduling a new one.
    """

    def __init__(self, name: str, delay_seconds: float, callback: AsyncCallback) -> None:
        """Initialize the timer.

        Args:
            name: Name used in log messages.
            delay_seconds: Delay between arming and firing.
            callback: Coroutine function to run when the timer fires.
        """
        self.name = name
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self) -> None:
        """Cancel any pending run and schedule a fresh one."""
        self.cancel()
        self._task = asyncio.create_task(self._fire())

    def cancel(self) -> None:
        """Cancel the pending run, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _fire(self) -> None:
        await asyncio.sleep(self.delay_seconds)
        # Detach first: the callback may cancel() this timer.
        self._task = None
        try:
            await self._callback()
        except Exception as e:
            logger.error(f"Timer {self.name} callback failed: {e}", exc_info=True)


class PeriodicTask:
    """Runs a callback on a fixed period until stopped."""

    def __init__(
        self,
        name: str,
        interval_seconds: float,
        callback: AsyncCallback,
        run_immediately: bool = False,
    ) -> None:
        """Initialize the periodic task.

        Args:
            name: Name used in log messages.
            interval_seconds: Period between runs.
            callback: Coroutine function to run each period.
            run_immediately: Also run once right after starting.
        """
        self.name = name
        self.interval_seconds = interval_seconds
        self._callback = callback
        self._run_immediately = run_immediately
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the task loop."""
        if self.running:
            logger.warning(f"Periodic task {self.name} already running")
            return
        self._task = asyncio.create_task(self._loop())
        logger.info(f"Started periodic task {self.name} ({self.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the task loop and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        if task is asyncio.current_task():
            return
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info(f"Stopped periodic task {self.name}")

    async def _loop(self) -> None:
        if self._run_immediately:
            await self._run_once()
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self._run_once()

    async def _run_once(self) -> None:
        try:
            await self._callback()
        except Exception as e:
            logger.error(f"Periodic task {self.name} failed: {e}", exc_info=True)
