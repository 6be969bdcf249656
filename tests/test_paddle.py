"""Tests for the paddle — sizing, steering and wall-bounded movement."""

import random

import pytest


def _setup(x=20, length=20, width=60, height=36, y=33):
    from ascii_breakout.board import PADDLE, Board
    from ascii_breakout.paddle import Paddle

    board = Board(width, height)
    paddle = Paddle(x=x, y=y, length=length)
    for cx in paddle.cells():
        board[cx, y] = PADDLE
    return board, paddle


def _paddle_columns(board, y):
    from ascii_breakout.board import TileKind

    return [x for x in range(board.width) if board[x, y].kind is TileKind.PADDLE]


@pytest.mark.parametrize("level, length", [(0, 20), (1, 20), (3, 18), (7, 16), (15, 10), (40, 10)])
def test_paddle_length_shrinks_to_minimum(level, length):
    from ascii_breakout.paddle import paddle_length

    assert paddle_length(level) == length


def test_paddle_row():
    from ascii_breakout.paddle import paddle_row

    assert paddle_row(36) == 33
    assert paddle_row(12) == 11


def test_move_left_shifts_one_column():
    from ascii_breakout.board import EMPTY, PADDLE
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup()
    paddle.steer(-1)

    assert move_paddle(paddle, board) is True
    assert paddle.x == 19
    assert board[19, 33] == PADDLE
    assert board[39, 33] == EMPTY
    assert _paddle_columns(board, 33) == list(range(19, 39))


def test_move_right_shifts_one_column():
    from ascii_breakout.board import EMPTY, PADDLE
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup()
    paddle.steer(1)

    assert move_paddle(paddle, board) is True
    assert paddle.x == 21
    assert board[40, 33] == PADDLE
    assert board[20, 33] == EMPTY


def test_stops_at_left_wall():
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup(x=0)
    paddle.steer(-1)

    assert move_paddle(paddle, board) is False
    assert paddle.x == 0
    assert paddle.direction == -1
    assert _paddle_columns(board, 33) == list(range(0, 20))


def test_stops_at_right_wall():
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup(x=40)
    paddle.steer(1)

    assert move_paddle(paddle, board) is False
    assert paddle.x == 40
    assert _paddle_columns(board, 33) == list(range(40, 60))


def test_does_not_move_without_direction():
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup()
    assert move_paddle(paddle, board) is False
    assert paddle.x == 20


def test_does_not_step_onto_ball():
    from ascii_breakout.board import BALL
    from ascii_breakout.paddle import move_paddle

    board, paddle = _setup()
    board[19, 33] = BALL
    paddle.steer(-1)

    assert move_paddle(paddle, board) is False
    assert board[19, 33] == BALL
    assert paddle.x == 20


def test_stays_in_bounds_for_any_command_sequence():
    from ascii_breakout.paddle import move_paddle

    rng = random.Random(5)
    board, paddle = _setup(length=14)
    for _ in range(2000):
        if rng.random() < 0.1:
            paddle.steer(rng.choice((-1, 1)))
        move_paddle(paddle, board)
        assert 0 <= paddle.x <= board.width - paddle.length
        assert _paddle_columns(board, 33) == list(paddle.cells())


def test_freeze_toggle_remembers_direction():
    from ascii_breakout.paddle import Paddle

    paddle = Paddle(x=20, y=33, length=20)
    paddle.steer(1)

    paddle.toggle_freeze()
    assert (paddle.direction, paddle.last_direction) == (0, 1)

    paddle.toggle_freeze()
    assert (paddle.direction, paddle.last_direction) == (1, 0)


def test_steer_clears_frozen_direction():
    from ascii_breakout.paddle import Paddle

    paddle = Paddle(x=20, y=33, length=20)
    paddle.steer(-1)
    paddle.toggle_freeze()
    paddle.steer(1)
    assert (paddle.direction, paddle.last_direction) == (1, 0)


def test_recenter():
    from ascii_breakout.paddle import Paddle

    paddle = Paddle(x=3, y=33, length=16, direction=1, last_direction=-1)
    paddle.recenter(60)
    assert paddle.x == 22
    assert (paddle.direction, paddle.last_direction) == (0, 0)
