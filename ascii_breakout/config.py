"""Config loader — YAML to dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class BoardConfig:
    width: int = 60
    height: int = 36


@dataclass
class GameConfig:
    starting_lives: int = 5
    tick_ms: int = 5
    paddle_period: int = 4
    block_points: int = 10


@dataclass
class AppConfig:
    board: BoardConfig = field(default_factory=BoardConfig)
    game: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        if self.board.width < 24:
            raise ValueError(f"board.width must be at least 24, got {self.board.width}")
        if self.board.height < 12:
            raise ValueError(f"board.height must be at least 12, got {self.board.height}")
        if self.game.starting_lives < 1:
            raise ValueError("game.starting_lives must be at least 1")
        if self.game.tick_ms < 0:
            raise ValueError("game.tick_ms must not be negative")
        if self.game.paddle_period < 1:
            raise ValueError("game.paddle_period must be at least 1")
        if self.game.block_points < 0:
            raise ValueError("game.block_points must not be negative")


def load_config(path: Path) -> AppConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    board = BoardConfig(**{k: v for k, v in (raw.get("board") or {}).items()})
    game = GameConfig(**{k: v for k, v in (raw.get("game") or {}).items()})

    return AppConfig(board=board, game=game)
