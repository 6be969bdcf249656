"""Board — fixed-size grid of tiles, block pairs, level generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ascii_breakout.ball import Ball
    from ascii_breakout.paddle import Paddle

# First column and row of the block field.
BLOCK_MARGIN = 3


class TileKind(Enum):
    EMPTY = "empty"
    BALL = "ball"
    PADDLE = "paddle"
    BLOCK = "block"


class BlockColor(Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"


@dataclass(frozen=True)
class Tile:
    kind: TileKind
    color: BlockColor | None = None  # set only for blocks

    @classmethod
    def block(cls, color: BlockColor) -> Tile:
        return cls(TileKind.BLOCK, color)

    @property
    def is_block(self) -> bool:
        return self.kind is TileKind.BLOCK


EMPTY = Tile(TileKind.EMPTY)
BALL = Tile(TileKind.BALL)
PADDLE = Tile(TileKind.PADDLE)


def block_partner(x: int) -> int:
    """Column of the other half of the block pair containing column x.

    Pairs always start on an odd column, so an odd x is the left half.
    """
    return x + 1 if x % 2 == 1 else x - 1


def max_block_row(level: int, height: int) -> int:
    """Exclusive lower edge of the block field for a level.

    Grows one row every two levels, capped at five-sixths of the field.
    """
    return height // 3 + min(level // 2, height // 2)


class Board:
    """Width x height grid of tiles, indexed as board[x, y].

    Every write is remembered so the caller can repaint only the cells
    that changed (see take_dirty).
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells = [[EMPTY] * height for _ in range(width)]
        self._dirty: list[tuple[int, int]] = []

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, pos: tuple[int, int]) -> Tile:
        x, y = pos
        self._check(x, y)
        return self._cells[x][y]

    def __setitem__(self, pos: tuple[int, int], tile: Tile) -> None:
        x, y = pos
        self._check(x, y)
        self._cells[x][y] = tile
        self._dirty.append((x, y))

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        self._cells = [[EMPTY] * self.height for _ in range(self.width)]
        self._dirty.clear()

    def clear_row(self, y: int) -> None:
        for x in range(self.width):
            self[x, y] = EMPTY

    def take_dirty(self) -> list[tuple[int, int]]:
        """Return cells written since the last call, oldest first, and forget them."""
        dirty = list(dict.fromkeys(self._dirty))
        self._dirty.clear()
        return dirty

    def cells(self):
        """Yield (x, y, tile) row by row, left to right."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self._cells[x][y]

    def count(self, kind: TileKind) -> int:
        return sum(1 for column in self._cells for tile in column if tile.kind is kind)

    def destroy_block(self, x: int, y: int) -> tuple[int, int]:
        """Empty the block pair containing (x, y). Returns the two columns, left first."""
        partner = block_partner(x)
        self[x, y] = EMPTY
        self[partner, y] = EMPTY
        return min(x, partner), max(x, partner)


def generate_board(
    board: Board,
    level: int,
    paddle: Paddle,
    ball: Ball,
    rng: random.Random,
) -> int:
    """Clear the board and lay out paddle, ball and the level's block field.

    Returns the number of block pairs placed.
    """
    board.clear()
    for x in paddle.cells():
        board[x, paddle.y] = PADDLE
    board[ball.x, ball.y] = BALL

    bottom = max_block_row(level, board.height)
    colors = list(BlockColor)
    blocks = 0
    for x in range(BLOCK_MARGIN, board.width - BLOCK_MARGIN, 2):
        for y in range(BLOCK_MARGIN, bottom):
            block = Tile.block(rng.choice(colors))
            board[x, y] = block
            board[x + 1, y] = block
            blocks += 1
    return blocks
