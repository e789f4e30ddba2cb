"""GameLoop: periodic tick driver for an engine.

Usage:
    loop = GameLoop(engine, interval=1.0)
    loop.start()          # background task on the running event loop
    ...
    await loop.stop()

    # or, headless for a fixed number of ticks
    await GameLoop(engine, interval=0.0).run(ticks=60)
"""

from __future__ import annotations

import asyncio
import contextlib
import logging

from pixelgarden.engine import GameEngine

logger = logging.getLogger(__name__)


class GameLoop:
    """Calls `engine.tick(interval)` every `interval` seconds.

    There is no drift correction: each tick passes the nominal interval as
    elapsed time.

    Args:
        engine: Engine to drive.
        interval: Seconds between ticks (also the dt passed to tick).
        dt: Elapsed time passed to each tick. Defaults to `interval`; set it
            when running faster than real time (e.g. interval=0 in tests).
    """

    def __init__(self, engine: GameEngine, interval: float = 1.0, dt: float | None = None):
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self._engine = engine
        self._interval = interval
        self._dt = interval if dt is None else dt
        self._task: asyncio.Task[None] | None = None
        self._ticks = 0

    @property
    def ticks(self) -> int:
        """Ticks performed since construction."""
        return self._ticks

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run(self, ticks: int | None = None) -> None:
        """Tick until cancelled, or `ticks` times if given."""
        remaining = ticks
        while remaining is None or remaining > 0:
            await asyncio.sleep(self._interval)
            self._engine.tick(self._dt)
            self._ticks += 1
            if remaining is not None:
                remaining -= 1

    def start(self) -> asyncio.Task[None]:
        """Start ticking in a background task on the running event loop."""
        if self.running:
            raise RuntimeError("GameLoop is already running")
        self._task = asyncio.get_running_loop().create_task(self.run(), name="pixelgarden-tick")
        logger.debug("Game loop started (interval=%ss)", self._interval)
        return self._task

    async def stop(self) -> None:
        """Cancel the background task and wait for in-flight saves."""
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
            logger.debug("Game loop stopped after %d ticks", self._ticks)
        await self._engine.flush()
