"""CLI for running headless snake games."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snek.config import BoardConfig

logger = logging.getLogger(__name__)

_MOVE_SIGNALS = {
    "N": "north",
    "E": "east",
    "S": "south",
    "W": "west",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snek",
        description="Headless snake simulation tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Run a scripted game and print its state.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    play_p.add_argument("--grid-size", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--moves", type=str, default="",
        help="Inputs: N/E/S/W turn then tick, '.' ticks only.",
    )
    play_p.add_argument(
        "--ticks", type=int, default=0,
        help="Extra ticks to run after the scripted moves.",
    )

    # --- init-config ---
    init_p = sub.add_parser("init-config", help="Write a board config file.")
    init_p.add_argument("output", help="Path of the JSON file to write.")
    init_p.add_argument("--grid-size", type=int, default=None)
    init_p.add_argument("--seed", type=int, default=None)

    return parser


def _load_config(args: argparse.Namespace) -> BoardConfig:
    from snek.config import BoardConfig

    config = (
        BoardConfig.load(args.config)
        if getattr(args, "config", None) else BoardConfig()
    )
    overrides = {
        name: getattr(args, name)
        for name in ("grid_size", "seed")
        if getattr(args, name) is not None
    }
    if overrides:
        config = replace(config, **overrides)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from snek.board import Board
    from snek.session import GameSession, Signal

    parser = _build_parser()
    moves = args.moves.upper()
    unknown = sorted(set(moves) - set(_MOVE_SIGNALS) - {"."})
    if unknown:
        parser.error(f"unknown move(s): {''.join(unknown)}")
    if args.ticks < 0:
        parser.error("--ticks must be non-negative")

    try:
        board = Board.from_config(_load_config(args))
    except ValueError as exc:
        parser.error(str(exc))
    session = GameSession(board)

    inputs = list(moves) + ["."] * args.ticks
    for move in inputs:
        if move != ".":
            session.handle(Signal(_MOVE_SIGNALS[move]))
        if not session.tick():
            break

    print(json.dumps(session.to_dict(), indent=2))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snek`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
