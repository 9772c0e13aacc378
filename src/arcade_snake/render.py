"""Text rendering of game snapshots."""

from __future__ import annotations

import numpy as np

from arcade_snake.models import GameSnapshot, GameStatus

HEAD = "@"
# Body glyphs by depth behind the head; deeper segments reuse the last tier.
BODY_TIERS = ("O", "o", "+", ".")
FOOD = "*"
EMPTY = " "

_STATUS_HINTS: dict[GameStatus, str] = {
    GameStatus.NOT_STARTED: "Press SPACE to start",
    GameStatus.RUNNING: "",
    GameStatus.PAUSED: "PAUSED",
    GameStatus.GAME_OVER: "GAME OVER",
}


def segment_glyph(index: int) -> str:
    """Return the glyph for the segment at *index* (0 is the head)."""
    if index == 0:
        return HEAD
    return BODY_TIERS[min(index - 1, len(BODY_TIERS) - 1)]


def render_frame(snapshot: GameSnapshot) -> list[str]:
    """Draw the board as one string per grid row."""
    canvas = np.full(
        (snapshot.grid_height, snapshot.grid_width), EMPTY, dtype="<U1",
    )
    fx, fy = snapshot.food
    canvas[fy, fx] = FOOD
    # Paint tail first so the head wins any overlap.
    for index in range(len(snapshot.snake) - 1, -1, -1):
        x, y = snapshot.snake[index]
        canvas[y, x] = segment_glyph(index)
    return ["".join(row) for row in canvas]


def status_line(snapshot: GameSnapshot) -> str:
    text = f"Score: {snapshot.score}  High: {snapshot.high_score}"
    message = snapshot.message or _STATUS_HINTS[snapshot.status]
    if message:
        text += f"  {message}"
    return text


class TextRenderer:
    """Keeps the most recent frame as plain text."""

    def __init__(self) -> None:
        self.frames = 0
        self.last: GameSnapshot | None = None
        self.lines: list[str] = []

    def draw(self, snapshot: GameSnapshot) -> None:
        self.frames += 1
        self.last = snapshot
        self.lines = [status_line(snapshot), *render_frame(snapshot)]

    def __str__(self) -> str:
        return "\n".join(self.lines)
