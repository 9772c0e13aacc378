"""Command-line launcher for Arcade Snake."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from arcade_snake.config import GameConfig
from arcade_snake.controls import InputPolicy
from arcade_snake.store import JsonFileStore, MemoryStore, ScoreStore

logger = logging.getLogger(__name__)

DEFAULT_SCORE_FILE = Path.home() / ".arcade-snake" / "scores.json"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcade-snake",
        description="Classic wrap-around snake in the terminal.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # Flags shared by both commands; each overrides the config file.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    common.add_argument(
        "--policy", type=str, default=None,
        choices=[p.value for p in InputPolicy],
        help="Input buffering policy.",
    )
    common.add_argument("--queue-capacity", type=int, default=None)
    common.add_argument("--seed", type=int, default=None)

    # --- play ---
    play_p = sub.add_parser(
        "play", parents=[common], help="Play in the current terminal.",
    )
    play_p.add_argument(
        "--high-score-file", type=str, default=str(DEFAULT_SCORE_FILE),
        help="JSON file holding the high score.",
    )
    play_p.add_argument(
        "--no-save", action="store_true",
        help="Keep the high score in memory only.",
    )
    play_p.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; the terminal is owned by the game.",
    )

    # --- config ---
    config_p = sub.add_parser(
        "config", parents=[common],
        help="Write the effective configuration as JSON.",
    )
    config_p.add_argument("output", help="Destination JSON path.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "policy": "input_policy",
        "queue_capacity": "queue_capacity",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    return replace(config, **overrides) if overrides else config


def _configure_logging(log_file: str | None) -> None:
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])


def _run_play(args: argparse.Namespace) -> int:
    from arcade_snake.terminal import play

    _configure_logging(args.log_file)
    config = _resolve_config(args)
    store: ScoreStore = (
        MemoryStore() if args.no_save else JsonFileStore(args.high_score_file)
    )
    play(config, store)
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``arcade-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        print(f"arcade-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 2


if __name__ == "__main__":
    sys.exit(main())
