"""Input normalization and direction buffering policies."""

from __future__ import annotations

import abc
import enum
import logging
from collections import deque

from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_CAPACITY = 4


class InputPolicy(str, enum.Enum):
    """How directional input is buffered between ticks."""

    IMMEDIATE = "immediate"
    QUEUED = "queued"


class Signal(enum.Enum):
    """Normalized player intents."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE = "toggle"

    @property
    def direction(self) -> Direction | None:
        return _SIGNAL_DIRECTIONS.get(self)


_SIGNAL_DIRECTIONS: dict[Signal, Direction] = {
    Signal.UP: Direction.UP,
    Signal.DOWN: Direction.DOWN,
    Signal.LEFT: Direction.LEFT,
    Signal.RIGHT: Direction.RIGHT,
}

# Key names as reported by browsers, curses (``curses.keyname``) and humans.
_KEY_SIGNALS: dict[str, Signal] = {
    "arrowup": Signal.UP,
    "arrowdown": Signal.DOWN,
    "arrowleft": Signal.LEFT,
    "arrowright": Signal.RIGHT,
    "key_up": Signal.UP,
    "key_down": Signal.DOWN,
    "key_left": Signal.LEFT,
    "key_right": Signal.RIGHT,
    "up": Signal.UP,
    "down": Signal.DOWN,
    "left": Signal.LEFT,
    "right": Signal.RIGHT,
    "w": Signal.UP,
    "s": Signal.DOWN,
    "a": Signal.LEFT,
    "d": Signal.RIGHT,
    "space": Signal.TOGGLE,
    " ": Signal.TOGGLE,
}


def signal_for_key(key: str | int) -> Signal | None:
    """Map a raw key name or character code to a :class:`Signal`.

    Returns ``None`` for unbound keys.
    """
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    return _KEY_SIGNALS.get(key.lower())


class DirectionResolver(abc.ABC):
    """Buffers directional input between ticks.

    ``submit`` is called whenever input arrives; ``resolve`` is called once
    per tick and returns the direction to move in.
    """

    @abc.abstractmethod
    def submit(self, direction: Direction, current: Direction) -> bool:
        """Offer *direction*; returns whether it was accepted."""

    @abc.abstractmethod
    def resolve(self, current: Direction) -> Direction:
        """Return the direction for the next tick."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Drop all buffered input."""

    @property
    @abc.abstractmethod
    def pending(self) -> tuple[Direction, ...]:
        """Directions currently buffered, oldest first."""


class PendingDirection(DirectionResolver):
    """Single-slot buffer: the latest non-reversing input wins.

    Input is compared against the direction the snake is currently moving
    in, so two quick presses inside one tick may overwrite each other.
    """

    def __init__(self) -> None:
        self._pending: Direction | None = None

    def submit(self, direction: Direction, current: Direction) -> bool:
        if direction.is_opposite(current):
            return False
        self._pending = direction
        return True

    def resolve(self, current: Direction) -> Direction:
        if self._pending is None:
            return current
        direction, self._pending = self._pending, None
        return direction

    def clear(self) -> None:
        self._pending = None

    @property
    def pending(self) -> tuple[Direction, ...]:
        return () if self._pending is None else (self._pending,)


class DirectionQueue(DirectionResolver):
    """Bounded FIFO buffer drained one direction per tick."""

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1.")
        self.capacity = capacity
        self._queue: deque[Direction] = deque()

    def submit(self, direction: Direction, current: Direction) -> bool:
        last = self._queue[-1] if self._queue else current
        if direction.is_opposite(last) or direction in self._queue:
            return False
        if len(self._queue) >= self.capacity:
            logger.debug(
                "Direction queue full (%d); dropping %s.",
                self.capacity, direction.name,
            )
            return False
        self._queue.append(direction)
        return True

    def resolve(self, current: Direction) -> Direction:
        if not self._queue:
            return current
        direction = self._queue.popleft()
        # The queued turn may have gone stale since it was accepted.
        if direction.is_opposite(current):
            return current
        return direction

    def clear(self) -> None:
        self._queue.clear()

    @property
    def pending(self) -> tuple[Direction, ...]:
        return tuple(self._queue)


def make_resolver(
    policy: InputPolicy, capacity: int = DEFAULT_QUEUE_CAPACITY,
) -> DirectionResolver:
    """Build the resolver for *policy*."""
    if policy == InputPolicy.QUEUED:
        return DirectionQueue(capacity)
    return PendingDirection()
