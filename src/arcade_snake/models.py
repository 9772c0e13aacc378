"""Pydantic models for the state handed to renderers."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameSnapshot(BaseModel):
    """Read-only view of the game state, taken after each mutation."""

    model_config = ConfigDict(frozen=True)

    grid_width: int = Field(ge=4)
    grid_height: int = Field(ge=4)
    tile_size: int = Field(default=1, ge=1)
    snake: list[tuple[int, int]] = Field(min_length=1)
    food: tuple[int, int]
    direction: tuple[int, int]
    score: int = Field(ge=0)
    high_score: int = Field(ge=0)
    status: GameStatus
    message: str = ""
    tick: int = Field(default=0, ge=0)

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]
