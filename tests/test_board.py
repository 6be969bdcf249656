"""Tests for the board — tiles, block pairs and level generation."""

import random
from unittest.mock import MagicMock

import pytest


def _entities(width=60, height=36, level=1):
    from ascii_breakout.ball import Ball
    from ascii_breakout.board import max_block_row
    from ascii_breakout.paddle import Paddle, paddle_length, paddle_row

    length = paddle_length(level)
    paddle = Paddle(x=(width - length) // 2, y=paddle_row(height), length=length)
    ball = Ball(x=width // 2, y=(max_block_row(level, height) + paddle.y) // 2,
                x_velocity=6, y_velocity=6, x_direction=1, y_direction=-1)
    return paddle, ball


def test_block_partner():
    from ascii_breakout.board import block_partner

    assert block_partner(9) == 10
    assert block_partner(10) == 9
    assert block_partner(3) == 4
    assert block_partner(56) == 55


def test_destroy_block_empties_exactly_the_pair():
    from ascii_breakout.board import EMPTY, Board, BlockColor, Tile, TileKind

    board = Board(60, 36)
    green = Tile.block(BlockColor.GREEN)
    for x in (7, 8, 9, 10, 11, 12):
        board[x, 5] = green

    assert board.destroy_block(10, 5) == (9, 10)
    assert board[9, 5] == EMPTY
    assert board[10, 5] == EMPTY
    assert board.count(TileKind.BLOCK) == 4
    assert board[8, 5] == green
    assert board[11, 5] == green


def test_out_of_bounds_access_raises():
    from ascii_breakout.board import BALL, Board

    board = Board(10, 10)
    with pytest.raises(IndexError):
        board[10, 0]
    with pytest.raises(IndexError):
        board[0, -1] = BALL


def test_take_dirty_reports_each_cell_once():
    from ascii_breakout.board import BALL, EMPTY, Board

    board = Board(10, 10)
    board[1, 1] = BALL
    board[2, 2] = BALL
    board[1, 1] = EMPTY

    assert board.take_dirty() == [(1, 1), (2, 2)]
    assert board.take_dirty() == []


def test_max_block_row_grows_and_caps():
    from ascii_breakout.board import max_block_row

    assert max_block_row(1, 36) == 12
    assert max_block_row(2, 36) == 13
    assert max_block_row(15, 36) == 19
    assert max_block_row(100, 36) == 30
    for level in range(1, 200):
        assert max_block_row(level, 36) <= 36 * 5 // 6


def test_generate_board_level_one():
    from ascii_breakout.board import BALL, PADDLE, Board, TileKind, generate_board

    board = Board(60, 36)
    paddle, ball = _entities()
    blocks = generate_board(board, 1, paddle, ball, random.Random(7))

    # 27 pairs per row (x = 3, 5, ... 55) on rows 3..11
    assert blocks == 27 * 9
    assert board.count(TileKind.BLOCK) == 2 * blocks
    assert board.count(TileKind.BALL) == 1
    assert board[ball.x, ball.y] == BALL
    assert board.count(TileKind.PADDLE) == paddle.length
    assert all(board[x, paddle.y] == PADDLE for x in paddle.cells())


def test_generated_blocks_come_in_same_colour_pairs():
    from ascii_breakout.board import Board, generate_board

    board = Board(60, 36)
    paddle, ball = _entities(level=9)
    generate_board(board, 9, paddle, ball, random.Random(3))

    for x, y, tile in board.cells():
        if not tile.is_block:
            continue
        assert 3 <= y < 16
        if x % 2 == 1:
            assert board[x + 1, y] == tile
        else:
            assert board[x - 1, y] == tile


def test_generate_board_draws_colour_per_pair():
    from ascii_breakout.board import BlockColor, Board, Tile, generate_board

    rng = MagicMock()
    rng.choice.side_effect = lambda seq: seq[0]
    board = Board(60, 36)
    paddle, ball = _entities()
    blocks = generate_board(board, 1, paddle, ball, rng)

    assert rng.choice.call_count == blocks
    assert board[3, 3] == Tile.block(BlockColor.RED)


def test_generate_board_clears_previous_level():
    from ascii_breakout.board import BALL, Board, TileKind, generate_board

    board = Board(60, 36)
    board[0, 0] = BALL
    board[59, 35] = BALL
    paddle, ball = _entities()
    generate_board(board, 1, paddle, ball, random.Random(1))

    assert board.count(TileKind.BALL) == 1


def test_counter_reaches_zero_exactly_when_no_blocks_remain():
    from ascii_breakout.board import Board, TileKind, generate_board
    from ascii_breakout.game import Session

    rng = random.Random(11)
    session = Session(board=Board(30, 20), rng=rng)
    paddle, ball = _entities(width=30, height=20)
    session.blocks_left = generate_board(session.board, 1, paddle, ball, rng)

    pairs = [(x, y) for x, y, tile in session.board.cells() if tile.is_block and x % 2 == 1]
    for i, (x, y) in enumerate(pairs):
        before = session.blocks_left
        session.destroy_block(x + (i % 2), y)  # alternate left and right halves
        assert session.blocks_left == before - 1
        assert (session.blocks_left == 0) == (session.board.count(TileKind.BLOCK) == 0)

    assert session.blocks_left == 0
    assert session.score == 10 * len(pairs)
