"""Tick-based game engine composing grid, snake, food and input logic."""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.controls import Signal, make_resolver
from arcade_snake.food import FoodSpawner
from arcade_snake.grid import Grid, Viewport
from arcade_snake.models import GameSnapshot, GameStatus
from arcade_snake.snake import Direction, Snake
from arcade_snake.store import MemoryStore, ScoreStore

logger = logging.getLogger(__name__)

FOOD_SCORE = 10

MSG_PAUSED = "PAUSED"
MSG_GAME_OVER = "GAME OVER! Press SPACE to Play Again"
MSG_HIGH_SCORE = "NEW HIGH SCORE! Press SPACE to Play Again"


class Renderer(Protocol):
    def draw(self, snapshot: GameSnapshot) -> None: ...


class GameEngine:
    """Single-player, tick-based game engine.

    The engine owns the grid, snake, food and input buffer. Each call to
    :meth:`tick` advances a running game by one cell; renderers are handed
    a :class:`GameSnapshot` after every change.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        viewport: Viewport | None = None,
        store: ScoreStore | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        cfg = self.config
        self.viewport = viewport or Viewport(
            cfg.viewport_width, cfg.viewport_height,
        )
        self.grid = self._build_grid(self.viewport)

        self.rng = np.random.default_rng(cfg.seed)
        self.food_spawner = FoodSpawner(margin=cfg.food_margin, rng=self.rng)
        self.resolver = make_resolver(cfg.input_policy, cfg.queue_capacity)
        self.store = store if store is not None else MemoryStore()
        self.renderer = renderer

        self.high_score = self._load_high_score()
        self.status = GameStatus.NOT_STARTED
        self.message = ""
        self.tick_count = 0
        self._pending_viewport: Viewport | None = None

        self._new_round()
        self.redraw()

    # --- setup ---

    def _build_grid(self, viewport: Viewport) -> Grid:
        """Build a grid for *viewport*, checking the start snake fits."""
        cfg = self.config
        grid = Grid.from_viewport(viewport, cfg.tiles_across, cfg.tiles_down)
        tail_x = cfg.start_x - (cfg.initial_length - 1)
        if not (
            grid.in_bounds(cfg.start_x, cfg.start_y)
            and grid.in_bounds(tail_x, cfg.start_y)
        ):
            raise ValueError(
                f"Initial snake does not fit a {grid.width}x{grid.height} "
                "grid; enlarge the viewport or move the start position.",
            )
        return grid

    def _new_round(self) -> None:
        cfg = self.config
        self.snake = Snake(
            cfg.start_x, cfg.start_y, Direction.RIGHT, cfg.initial_length,
        )
        self.direction = Direction.RIGHT
        self.score = 0
        self.resolver.clear()
        self.food = self._place_food(default=(cfg.start_x, cfg.start_y))

    def _place_food(self, default: tuple[int, int]) -> tuple[int, int]:
        food = self.food_spawner.spawn(self.grid, self.snake)
        return default if food is None else food

    def _load_high_score(self) -> int:
        try:
            saved = self.store.get(self.config.high_score_key)
        except (OSError, ValueError):
            logger.warning("Could not read high score; starting from 0.")
            return 0
        return max(saved or 0, 0)

    def _save_high_score(self) -> None:
        try:
            self.store.set(self.config.high_score_key, self.high_score)
        except OSError:
            logger.warning("Could not persist high score %d.", self.high_score)

    # --- input ---

    def handle_signal(self, signal: Signal) -> None:
        """Dispatch a normalized input signal."""
        if signal == Signal.TOGGLE:
            self.toggle()
        else:
            self.steer(signal.direction)

    def toggle(self) -> None:
        """Start a fresh game or flip pause on a running one."""
        if self.status == GameStatus.NOT_STARTED:
            self.start()
            return
        if self.status == GameStatus.GAME_OVER:
            logger.debug("Ignoring toggle while a reset is pending.")
            return

        if self.status == GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
            self.message = MSG_PAUSED
        else:
            self.status = GameStatus.RUNNING
            self.message = ""
        logger.info("Game %s.", self.status.value)
        self.redraw()

    def start(self) -> bool:
        """Enter the running state from ``NOT_STARTED``."""
        if self.status != GameStatus.NOT_STARTED:
            return False
        self.status = GameStatus.RUNNING
        self.message = ""
        logger.info("Game started (high score %d).", self.high_score)
        self.redraw()
        return True

    def steer(self, direction: Direction) -> bool:
        """Buffer a direction change; only honoured while running."""
        if self.status != GameStatus.RUNNING:
            return False
        return self.resolver.submit(direction, self.direction)

    # --- simulation ---

    def tick(self) -> bool:
        """Advance the game by one cell.

        Returns ``False`` without touching any state when the game is not
        running (not started, paused or over).
        """
        if self.status != GameStatus.RUNNING:
            return False

        self.direction = self.resolver.resolve(self.direction)
        dx, dy = self.direction.value
        hx, hy = self.snake.head
        new_head = self.grid.wrap(hx + dx, hy + dy)

        # Checked against the pre-move body, so the tail cell counts even
        # though it would vacate this tick.
        if self.snake.occupies(new_head):
            self._game_over()
            return True

        ate = new_head == self.food
        self.snake.advance(new_head, grow=ate)
        if ate:
            self.score += FOOD_SCORE
            self.food = self._place_food(default=self.food)

        self.tick_count += 1
        self.redraw()
        return True

    def _game_over(self) -> None:
        self.tick_count += 1
        self._finish()
        logger.info(
            "Snake died at tick %d with score %d.", self.tick_count, self.score,
        )
        self.redraw()

    def abort(self) -> bool:
        """End the current game without drawing.

        Used when the tick loop fails; the game can then be reset as after
        a normal game over.
        """
        if self.status not in (GameStatus.RUNNING, GameStatus.PAUSED):
            return False
        self._finish()
        logger.warning("Game aborted at tick %d.", self.tick_count)
        return True

    def _finish(self) -> None:
        """Enter ``GAME_OVER``, recording a new high score first."""
        self.status = GameStatus.GAME_OVER
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
            self.message = MSG_HIGH_SCORE
            logger.info("New high score: %d.", self.high_score)
        else:
            self.message = MSG_GAME_OVER

    def reset(self) -> bool:
        """Return a finished game to its starting shape.

        Safe to call repeatedly; only acts in ``GAME_OVER``. The game-over
        message stays up until the next start.
        """
        if self.status != GameStatus.GAME_OVER:
            return False
        if self._pending_viewport is not None:
            self._apply_viewport(self._pending_viewport)
        self._new_round()
        self.status = GameStatus.NOT_STARTED
        logger.info("Game reset.")
        self.redraw()
        return True

    # --- viewport ---

    def request_resize(self, width: int, height: int) -> bool:
        """Adopt a new viewport size.

        Takes effect immediately between games; during a game the change is
        held back until the next reset. Unusable sizes are ignored.
        """
        viewport = Viewport(width, height)
        try:
            self._build_grid(viewport)
        except ValueError as exc:
            logger.warning("Ignoring resize to %dx%d: %s", width, height, exc)
            return False

        if self.status == GameStatus.NOT_STARTED:
            self._apply_viewport(viewport)
            if not self.grid.in_bounds(*self.food):
                self.food = self._place_food(default=self.snake.head)
        else:
            self._pending_viewport = viewport
            logger.info("Resize to %dx%d deferred to next game.", width, height)
        self.redraw()
        return True

    def _apply_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport
        self.grid = self._build_grid(viewport)
        self._pending_viewport = None
        logger.info(
            "Grid resized to %dx%d (tile %d).",
            self.grid.width, self.grid.height, self.grid.tile_size,
        )

    # --- output ---

    def snapshot(self) -> GameSnapshot:
        """Return the current state for rendering."""
        return GameSnapshot(
            grid_width=self.grid.width,
            grid_height=self.grid.height,
            tile_size=self.grid.tile_size,
            snake=self.snake.cells(),
            food=self.food,
            direction=self.direction.value,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            message=self.message,
            tick=self.tick_count,
        )

    def redraw(self) -> None:
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())
