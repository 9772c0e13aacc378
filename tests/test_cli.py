"""Tests for the CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from arcade_snake.cli import _build_parser, _resolve_config, main
from arcade_snake.config import GameConfig
from arcade_snake.controls import InputPolicy
from arcade_snake.store import JsonFileStore, MemoryStore


class TestParser:
    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.policy is None
        assert not args.no_save

    def test_invalid_policy_rejected(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["play", "--policy", "eager"])

    def test_no_command_prints_help(self):
        assert main([]) == 1


class TestResolveConfig:
    def test_flags_override_defaults(self):
        args = _build_parser().parse_args(
            ["play", "--policy", "queued", "--queue-capacity", "2",
             "--seed", "5"],
        )
        cfg = _resolve_config(args)
        assert cfg.input_policy == InputPolicy.QUEUED
        assert cfg.queue_capacity == 2
        assert cfg.seed == 5

    def test_flags_override_config_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        GameConfig(food_margin=0.2, seed=1).save(path)
        args = _build_parser().parse_args(
            ["play", "--config", str(path), "--seed", "7"],
        )
        cfg = _resolve_config(args)
        assert cfg.food_margin == 0.2
        assert cfg.seed == 7


class TestConfigCommand:
    def test_writes_config(self, tmp_path):
        out = tmp_path / "out.json"
        assert main(["config", str(out), "--policy", "queued"]) == 0
        assert GameConfig.load(out).input_policy == InputPolicy.QUEUED

    def test_invalid_value_reports_error(self, tmp_path, capsys):
        out = tmp_path / "out.json"
        assert main(["config", str(out), "--queue-capacity", "0"]) == 2
        assert "queue_capacity" in capsys.readouterr().err
        assert not out.exists()


class TestPlayCommand:
    def test_play_uses_file_store(self, tmp_path):
        score_file = tmp_path / "scores.json"
        with patch("arcade_snake.terminal.play") as play:
            code = main(["play", "--high-score-file", str(score_file)])
        assert code == 0
        config, store = play.call_args.args
        assert isinstance(config, GameConfig)
        assert isinstance(store, JsonFileStore)
        assert store.path == score_file

    def test_play_no_save(self):
        with patch("arcade_snake.terminal.play") as play:
            main(["play", "--no-save"])
        _, store = play.call_args.args
        assert isinstance(store, MemoryStore)


class TestFixedTickRate:
    def test_tick_flag_not_offered(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["play", "--tick-ms", "100"])

    def test_default_tick_interval(self):
        args = _build_parser().parse_args(["play"])
        assert _resolve_config(args).tick_interval_ms == 140
