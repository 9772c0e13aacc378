"""Arcade Snake — wrap-around snake game engine."""

from arcade_snake.config import GameConfig
from arcade_snake.controls import (
    DirectionQueue,
    InputPolicy,
    PendingDirection,
    Signal,
)
from arcade_snake.engine import GameEngine
from arcade_snake.grid import Grid, Viewport
from arcade_snake.models import GameSnapshot, GameStatus
from arcade_snake.runtime import GameLoop
from arcade_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "DirectionQueue",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameSnapshot",
    "GameStatus",
    "Grid",
    "InputPolicy",
    "PendingDirection",
    "Signal",
    "Snake",
    "Viewport",
]
