"""Grid geometry: viewport sizing, wrap-around and occupancy."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

# Tile size is chosen so at least this many tiles fit in each axis.
TILES_ACROSS = 25
TILES_DOWN = 14


class CellType(enum.IntEnum):
    """Integer codes stored in occupancy arrays."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


@dataclass(frozen=True)
class Viewport:
    """Drawable area reported by the host, in host units (pixels, columns)."""

    width: int
    height: int

    def tile_size(
        self, tiles_across: int = TILES_ACROSS, tiles_down: int = TILES_DOWN,
    ) -> int:
        return math.floor(
            min(self.width / tiles_across, self.height / tiles_down),
        )


class Grid:
    """Toroidal game grid.

    Coordinates use (x, y) ordering; occupancy arrays are indexed
    ``[y, x]`` consistent with NumPy row-major layout.
    """

    def __init__(self, width: int, height: int, tile_size: int = 1) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        if tile_size < 1:
            raise ValueError("tile_size must be at least 1.")
        self.width = width
        self.height = height
        self.tile_size = tile_size

    @classmethod
    def from_viewport(
        cls,
        viewport: Viewport,
        tiles_across: int = TILES_ACROSS,
        tiles_down: int = TILES_DOWN,
    ) -> Grid:
        """Fit as many whole tiles as the viewport holds."""
        tile = viewport.tile_size(tiles_across, tiles_down)
        if tile < 1:
            raise ValueError(
                f"Viewport {viewport.width}x{viewport.height} is too small "
                f"for a {tiles_across}x{tiles_down} tile layout.",
            )
        return cls(viewport.width // tile, viewport.height // tile, tile)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return x % self.width, y % self.height

    def inset(self, margin: float) -> tuple[range, range]:
        """Return the x and y ranges left after trimming *margin* per edge."""
        mx = math.floor(self.width * margin)
        my = math.floor(self.height * margin)
        return range(mx, self.width - mx), range(my, self.height - my)

    def occupancy(
        self,
        snake_cells: Iterable[tuple[int, int]],
        food: tuple[int, int] | None = None,
    ) -> np.ndarray:
        """Paint snake and food onto a fresh ``(height, width)`` array."""
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        if food is not None and self.in_bounds(*food):
            cells[food[1], food[0]] = CellType.FOOD
        for x, y in snake_cells:
            if self.in_bounds(x, y):
                cells[y, x] = CellType.SNAKE
        return cells

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "tile_size": self.tile_size,
        }
