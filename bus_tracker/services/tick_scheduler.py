# path: bus-tracker-api/bus_tracker/services/tick_scheduler.py

from __future__ import annotations

from typing import Optional
import asyncio
import logging

from bus_tracker.services.fleet_tracker import FleetTracker

logger = logging.getLogger(__name__)


class TickScheduler:
    """Calls tracker.tick() every `interval_seconds` on the running event loop."""

    def __init__(self, tracker: FleetTracker, interval_seconds: float = 5.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.tracker = tracker
        self.interval_seconds = float(interval_seconds)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            # tick() holds no awaits, so it finishes before any request is served.
            self.tracker.tick()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="fleet_tick")
        logger.info("Tick scheduler started (every %.1fs)", self.interval_seconds)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Tick scheduler stopped after %d ticks", self.tracker.tick_count)
