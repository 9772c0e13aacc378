"""Tests for the high-score stores."""

import json

import pytest

from arcade_snake.store import JsonFileStore, MemoryStore


class TestMemoryStore:
    def test_missing_key(self):
        assert MemoryStore().get("snakeHighScore") is None

    def test_set_and_get(self):
        store = MemoryStore()
        store.set("snakeHighScore", 40)
        assert store.get("snakeHighScore") == 40

    def test_initial_values(self):
        store = MemoryStore({"snakeHighScore": 70})
        assert store.get("snakeHighScore") == 70


class TestJsonFileStore:
    def test_missing_file(self, tmp_path):
        store = JsonFileStore(tmp_path / "scores.json")
        assert store.get("snakeHighScore") is None

    def test_round_trip(self, tmp_path):
        path = tmp_path / "dir" / "scores.json"
        JsonFileStore(path).set("snakeHighScore", 120)
        assert JsonFileStore(path).get("snakeHighScore") == 120
        assert json.loads(path.read_text()) == {"snakeHighScore": 120}

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"other": 1}))
        JsonFileStore(path).set("snakeHighScore", 30)
        assert json.loads(path.read_text()) == {"other": 1, "snakeHighScore": 30}

    def test_malformed_file_raises_on_get(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("not json")
        with pytest.raises(ValueError):
            JsonFileStore(path).get("snakeHighScore")

    def test_non_object_raises_on_get(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            JsonFileStore(path).get("snakeHighScore")

    def test_set_overwrites_malformed_file(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("not json")
        JsonFileStore(path).set("snakeHighScore", 10)
        assert JsonFileStore(path).get("snakeHighScore") == 10

    def test_non_integer_value_raises(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"snakeHighScore": "lots"}))
        with pytest.raises(ValueError, match="not an integer"):
            JsonFileStore(path).get("snakeHighScore")
