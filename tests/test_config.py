"""Tests for GameConfig."""

import json

import pytest

from arcade_snake.config import GameConfig
from arcade_snake.controls import InputPolicy


class TestGameConfigDefaults:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.tick_interval_ms == 140
        assert cfg.reset_delay_ms == 100
        assert cfg.input_policy == InputPolicy.IMMEDIATE
        assert cfg.queue_capacity == 4
        assert cfg.initial_length == 5
        assert (cfg.start_x, cfg.start_y) == (7, 8)
        assert cfg.high_score_key == "snakeHighScore"

    def test_seconds(self):
        cfg = GameConfig(tick_interval_ms=250, reset_delay_ms=50)
        assert cfg.tick_interval == pytest.approx(0.25)
        assert cfg.reset_delay == pytest.approx(0.05)

    def test_policy_from_string(self):
        cfg = GameConfig(input_policy="queued")
        assert cfg.input_policy is InputPolicy.QUEUED


class TestGameConfigValidation:
    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("tick_interval_ms", 0),
            ("reset_delay_ms", -1),
            ("queue_capacity", 0),
            ("food_margin", 0.5),
            ("initial_length", 0),
            ("tiles_across", 0),
            ("high_score_key", ""),
        ],
    )
    def test_rejects_invalid(self, field, value):
        with pytest.raises(ValueError, match=field):
            GameConfig(**{field: value})

    def test_rejects_unknown_policy(self):
        with pytest.raises(ValueError):
            GameConfig(input_policy="telepathic")


class TestGameConfigSerialization:
    def test_to_dict_is_json_ready(self):
        d = GameConfig(input_policy=InputPolicy.QUEUED).to_dict()
        assert d["input_policy"] == "queued"
        json.dumps(d)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(input_policy="queued", queue_capacity=2, seed=9)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert GameConfig.load(path) == cfg
