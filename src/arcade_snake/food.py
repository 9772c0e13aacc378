"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from arcade_snake.grid import CellType

if TYPE_CHECKING:
    from arcade_snake.grid import Grid
    from arcade_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on free cells away from the grid edges.

    Candidates are drawn uniformly from the inset region (``margin`` of the
    grid width/height trimmed from each edge) and resampled until one misses
    the snake. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        margin: float = 0.15,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 <= margin < 0.5:
            raise ValueError("margin must be in [0, 0.5).")
        self.margin = margin
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, grid: Grid, snake: Snake) -> tuple[int, int] | None:
        """Pick a food cell not occupied by *snake*.

        Returns ``None`` only when every grid cell is taken.
        """
        xs, ys = grid.inset(self.margin)
        occupied = grid.occupancy(snake.body)
        region = occupied[ys.start:ys.stop, xs.start:xs.stop]
        if not (region == CellType.EMPTY).any():
            return self._spawn_anywhere(occupied)

        while True:
            x = xs.start + int(self.rng.integers(len(xs)))
            y = ys.start + int(self.rng.integers(len(ys)))
            if not snake.occupies((x, y)):
                return x, y

    def _spawn_anywhere(self, occupied: np.ndarray) -> tuple[int, int] | None:
        free = np.argwhere(occupied == CellType.EMPTY)
        if len(free) == 0:
            logger.warning("No empty cells available for food placement.")
            return None
        logger.warning(
            "Inset food region is full; placing food near the edge.",
        )
        y, x = free[int(self.rng.integers(len(free)))]
        return int(x), int(y)
