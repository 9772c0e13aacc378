"""Curses front-end: keyboard input source and screen renderer."""

from __future__ import annotations

import asyncio
import curses
import logging

from arcade_snake.config import GameConfig
from arcade_snake.controls import Signal, signal_for_key
from arcade_snake.engine import GameEngine
from arcade_snake.grid import Viewport
from arcade_snake.models import GameSnapshot
from arcade_snake.render import render_frame, status_line
from arcade_snake.runtime import GameLoop
from arcade_snake.store import ScoreStore

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.01  # seconds between keyboard polls
_QUIT_KEYS = {ord("q"), ord("Q"), 27}


class CursesRenderer:
    """Draws snapshots into a curses window, status line on top."""

    def __init__(self, window: curses.window) -> None:
        self.window = window

    def draw(self, snapshot: GameSnapshot) -> None:
        rows, cols = self.window.getmaxyx()
        # Leave the last column alone; writing it scrolls some terminals.
        width = max(cols - 1, 0)
        lines = [status_line(snapshot), *render_frame(snapshot)]
        self.window.erase()
        for row, line in enumerate(lines[:rows]):
            self.window.addnstr(row, 0, line, width)
        self.window.refresh()


_ARROW_SIGNALS: dict[int, Signal] = {
    curses.KEY_UP: Signal.UP,
    curses.KEY_DOWN: Signal.DOWN,
    curses.KEY_LEFT: Signal.LEFT,
    curses.KEY_RIGHT: Signal.RIGHT,
}


def key_to_signal(key: int) -> Signal | None:
    """Translate a curses key code into a :class:`Signal`."""
    if key in _ARROW_SIGNALS:
        return _ARROW_SIGNALS[key]
    if not 0 <= key < 256:
        return None
    return signal_for_key(key)


def terminal_viewport(window: curses.window) -> Viewport:
    """Viewport in character cells, minus the status row."""
    rows, cols = window.getmaxyx()
    return Viewport(cols - 1, rows - 1)


async def _play(
    window: curses.window, config: GameConfig, store: ScoreStore,
) -> None:
    engine = GameEngine(
        config,
        viewport=terminal_viewport(window),
        store=store,
        renderer=CursesRenderer(window),
    )
    loop = GameLoop(engine)
    try:
        while True:
            key = window.getch()
            if key == -1:
                await asyncio.sleep(_POLL_INTERVAL)
                continue
            if key in _QUIT_KEYS:
                logger.info("Quit requested.")
                break
            if key == curses.KEY_RESIZE:
                viewport = terminal_viewport(window)
                loop.resize(viewport.width, viewport.height)
                continue
            signal = key_to_signal(key)
            if signal is not None:
                loop.signal(signal)
    finally:
        await loop.close()


def play(config: GameConfig, store: ScoreStore) -> None:
    """Run the game in the current terminal until the player quits."""

    def _main(window: curses.window) -> None:
        curses.curs_set(0)
        window.nodelay(True)
        window.keypad(True)
        asyncio.run(_play(window, config, store))

    curses.wrapper(_main)
