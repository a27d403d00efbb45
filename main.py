#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset NAME] [--rows R --cols C --mines M] [--seed S]
    python main.py demo [--games N] [--delay SECONDS]
"""
import argparse
import logging
import random
import sys
from typing import Optional

from demo import demo, positive_int
from src.sweeper import (
    BoardConfig,
    GameSession,
    InvalidConfiguration,
    PRESETS,
    Ticker,
    render_board,
    render_status,
)

HELP_TEXT = """\
Commands:
  r ROW COL   reveal a cell
  f ROW COL   flag or unflag a cell
  n           start a new game
  q           quit
Reveal every cell that is not a mine to win."""


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Combine a preset with any explicit dimension overrides."""
    preset = PRESETS[args.preset]
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        mine_count=args.mines if args.mines is not None else preset.mine_count,
    )


def parse_move(line: str) -> Optional[tuple]:
    """Split ``"r 3 4"`` into ``("r", 3, 4)``; None if malformed."""
    parts = line.split()
    if len(parts) != 3 or parts[0] not in ("r", "f"):
        return None
    try:
        return parts[0], int(parts[1]), int(parts[2])
    except ValueError:
        return None


def play(args: argparse.Namespace) -> int:
    """Play an interactive game in the terminal."""
    try:
        config = build_config(args)
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(rng=rng)
    session.new_game(config=config)
    ticker = Ticker(session)

    print(HELP_TEXT)
    while True:
        ticker.poll()
        print()
        print(render_board(session, headers=True))
        print(render_status(session))

        try:
            line = input("> ").strip().lower()
        except EOFError:
            return 0

        ticker.poll()
        if line == "q":
            return 0
        if line == "n":
            session.new_game(config=config)
            ticker.restart()
            continue

        move = parse_move(line)
        if move is None:
            print(HELP_TEXT)
            continue

        action, row, col = move
        if action == "r":
            session.click(row, col)
        else:
            session.flag(row, col)


def run_demo(args: argparse.Namespace) -> int:
    """Watch random moves play out."""
    try:
        config = build_config(args)
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}", file=sys.stderr)
        return 2

    demo(delay=args.delay, games=args.games, config=config, seed=args.seed)
    return 0


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size options shared by every command."""
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="default",
        help="Board size preset (default: 10x10 with 10 mines)",
    )
    parser.add_argument("--rows", type=int, default=None, help="Number of rows")
    parser.add_argument("--cols", type=int, default=None, help="Number of columns")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )


def main(argv: Optional[list] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=positive_int, default=3, help="Number of games to play"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "demo":
        return run_demo(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
