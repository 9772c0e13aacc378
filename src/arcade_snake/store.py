"""Key/value stores for the persisted high score."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Minimal integer key/value storage."""

    def get(self, key: str) -> int | None: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryStore:
    """Process-local store; nothing survives a restart."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._values: dict[str, int] = dict(initial or {})

    def get(self, key: str) -> int | None:
        return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        self._values[key] = int(value)


class JsonFileStore:
    """Store backed by a single JSON object on disk.

    Raises ``OSError`` or ``ValueError`` on unreadable/malformed files; the
    caller decides whether that is fatal.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        raw = json.loads(self.path.read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path} does not hold a JSON object.")
        return raw

    def get(self, key: str) -> int | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, int):
            raise ValueError(f"{key!r} in {self.path} is not an integer.")
        return value

    def set(self, key: str, value: int) -> None:
        try:
            data = self._read()
        except ValueError:
            logger.warning("Overwriting malformed score file %s.", self.path)
            data = {}
        data[key] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
