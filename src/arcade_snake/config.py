"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from arcade_snake.controls import DEFAULT_QUEUE_CAPACITY, InputPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunables for a single-player game.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    # Timing
    tick_interval_ms: int = 140
    reset_delay_ms: int = 100

    # Input
    input_policy: InputPolicy = InputPolicy.IMMEDIATE
    queue_capacity: int = DEFAULT_QUEUE_CAPACITY

    # Food
    food_margin: float = 0.15

    # Starting snake
    start_x: int = 7
    start_y: int = 8
    initial_length: int = 5

    # Layout
    tiles_across: int = 25
    tiles_down: int = 14
    viewport_width: int = 1000
    viewport_height: int = 560

    # Persistence
    high_score_key: str = "snakeHighScore"

    seed: int | None = None

    def __post_init__(self) -> None:
        # Accept plain strings, e.g. from JSON or the CLI.
        object.__setattr__(self, "input_policy", InputPolicy(self.input_policy))

        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be at least 1.")
        if self.reset_delay_ms < 0:
            raise ValueError("reset_delay_ms must be >= 0.")
        if self.queue_capacity < 1:
            raise ValueError("queue_capacity must be at least 1.")
        if not 0.0 <= self.food_margin < 0.5:
            raise ValueError("food_margin must be in [0, 0.5).")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.tiles_across < 1 or self.tiles_down < 1:
            raise ValueError("tiles_across and tiles_down must be positive.")
        if not self.high_score_key:
            raise ValueError("high_score_key must not be empty.")

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000.0

    @property
    def reset_delay(self) -> float:
        return self.reset_delay_ms / 1000.0

    def to_dict(self) -> dict:
        d = asdict(self)
        d["input_policy"] = self.input_policy.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
