"""Asyncio timer driving the engine's tick loop and delayed resets."""

from __future__ import annotations

import asyncio
import logging

from arcade_snake.controls import Signal
from arcade_snake.engine import GameEngine
from arcade_snake.models import GameStatus

logger = logging.getLogger(__name__)


class GameLoop:
    """Runs :meth:`GameEngine.tick` on a fixed interval.

    The repeating task is (re)started whenever a game starts and stops on
    its own when the game ends, scheduling a one-shot reset after
    ``config.reset_delay``. Input and ticks share one event loop, so no
    locking is needed.
    """

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine
        self._task: asyncio.Task | None = None
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def ticking(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def reset_pending(self) -> bool:
        return self._reset_handle is not None

    def signal(self, signal: Signal) -> None:
        """Forward a normalized input signal to the engine."""
        was_idle = self.engine.status == GameStatus.NOT_STARTED
        self.engine.handle_signal(signal)
        if was_idle and self.engine.status == GameStatus.RUNNING:
            self._restart_timer()

    def resize(self, width: int, height: int) -> None:
        self.engine.request_resize(width, height)

    def _restart_timer(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.get_running_loop().create_task(self._tick_loop())

    async def _tick_loop(self) -> None:
        """Tick until the game ends, then schedule the reset."""
        interval = self.engine.config.tick_interval
        try:
            while True:
                await asyncio.sleep(interval)
                self.engine.tick()
                if self.engine.status == GameStatus.GAME_OVER:
                    self._schedule_reset()
                    return
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error; ending the game.")
            self.engine.abort()
            self._schedule_reset()

    def _schedule_reset(self) -> None:
        if self._reset_handle is not None:
            return
        self._reset_handle = asyncio.get_running_loop().call_later(
            self.engine.config.reset_delay, self._run_reset,
        )

    def _run_reset(self) -> None:
        self._reset_handle = None
        self.engine.reset()

    async def close(self) -> None:
        """Cancel the tick task and any pending reset."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
