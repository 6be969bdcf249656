"""ASCII Breakout — command-line entry point."""

import argparse
import curses
import random
import shutil
import sys
from pathlib import Path

import yaml

from ascii_breakout.config import AppConfig, load_config
from ascii_breakout.game import Game, Outcome
from ascii_breakout.renderer import CursesDisplay, required_size


def starting_level(value: str) -> int:
    level = int(value)
    if level < 1:
        raise argparse.ArgumentTypeError(f"level must be 1 or higher, got {level}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Breakout in the terminal")
    parser.add_argument("level", nargs="?", type=starting_level, default=1,
                        help="Level to start on")
    parser.add_argument("--config", help="YAML config file (built-in defaults if omitted)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible game")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def read_config(path: str | None) -> AppConfig:
    """Load the config file, or exit with a message if it is missing or invalid."""
    if path is None:
        return AppConfig()
    config_path = Path(path)
    if not config_path.exists():
        print(f"Config not found: {config_path}")
        sys.exit(1)
    try:
        return load_config(config_path)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Invalid config {config_path}: {e}")
        sys.exit(1)


def terminal_fits(config: AppConfig) -> bool:
    cols, rows = required_size(config.board.width, config.board.height)
    size = shutil.get_terminal_size()
    return size.columns >= cols and size.lines >= rows


def _play(screen, game: Game, level: int) -> Outcome:
    game.display = CursesDisplay(screen, game.config.board.width, game.config.board.height)
    return game.run(level)


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    config = read_config(args.config)

    if not terminal_fits(config):
        cols, rows = required_size(config.board.width, config.board.height)
        print(f"Terminal too small: need at least {cols}x{rows}")
        sys.exit(1)

    if args.verbose:
        source = args.config or "built-in defaults"
        print(f"Config: {source} ({config.board.width}x{config.board.height} board)")
        print(f"Seed: {args.seed if args.seed is not None else 'random'}, starting level {args.level}")

    game = Game(config, rng=random.Random(args.seed))
    try:
        outcome = curses.wrapper(_play, game, args.level)
    except KeyboardInterrupt:
        print(f"\nBye! Final score: {game.session.score} Level: {game.session.level}")
        return

    if outcome is Outcome.QUIT:
        print(f"Quit. Final score: {game.session.score} Level: {game.session.level}")
    else:
        print(f"Game over. Final score: {game.session.score} Level: {game.session.level}")


if __name__ == "__main__":
    main()
