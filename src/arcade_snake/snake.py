"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downwards.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        """Two directions are opposite when their vectors cancel out."""
        dx, dy = self.value
        ox, oy = other.value
        return dx + ox == 0 and dy + oy == 0


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 5,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[tuple[int, int]] = deque(
            (start_x - dx * i, start_y - dy * i) for i in range(length)
        )

    @classmethod
    def from_cells(cls, cells: Iterable[tuple[int, int]]) -> Snake:
        """Build a snake from explicit cells, head first."""
        body = deque((int(x), int(y)) for x, y in cells)
        if not body:
            raise ValueError("Snake length must be at least 1.")
        snake = cls.__new__(cls)
        snake.body = body
        return snake

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    def occupies(self, cell: tuple[int, int]) -> bool:
        """Check whether any segment, tail included, sits on *cell*."""
        return cell in self.body

    def advance(
        self, new_head: tuple[int, int], grow: bool = False,
    ) -> tuple[int, int] | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def cells(self) -> list[tuple[int, int]]:
        return list(self.body)
