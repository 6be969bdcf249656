"""Ball — per-axis frame periods and the per-frame collision resolver."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ascii_breakout.board import BALL, EMPTY, TileKind

if TYPE_CHECKING:
    from ascii_breakout.game import Session

# Frame periods, half-open ranges for randrange.
SPAWN_VELOCITY = (6, 16)
BOUNCE_VELOCITY = (5, 13)


@dataclass
class Ball:
    x: int
    y: int
    # Frames between moves on each axis; larger is slower.
    x_velocity: int
    y_velocity: int
    x_direction: int  # -1 left, +1 right
    y_direction: int  # -1 up, +1 down

    @classmethod
    def spawn(cls, x: int, y: int, rng: random.Random) -> Ball:
        """Fresh ball for a new life: random periods and side, always heading up."""
        return cls(
            x=x,
            y=y,
            x_velocity=rng.randrange(*SPAWN_VELOCITY),
            y_velocity=rng.randrange(*SPAWN_VELOCITY),
            x_direction=rng.choice((-1, 1)),
            y_direction=-1,
        )

    def next_position(self, frame: int) -> tuple[int, int]:
        x, y = self.x, self.y
        if frame % self.x_velocity == 0:
            x += self.x_direction
        if frame % self.y_velocity == 0:
            y += self.y_direction
        return x, y


def step_ball(ball: Ball, session: Session, frame: int) -> bool:
    """Advance the ball one frame. Returns False once it drops below the field.

    Only an empty, in-bounds destination actually moves the ball; every
    other case bounces it in place, checked in this order: corner, side
    wall, ceiling, paddle, block.
    """
    board = session.board
    rng = session.rng
    next_x, next_y = ball.next_position(frame)

    if (next_x, next_y) == (ball.x, ball.y):
        return True

    if next_y >= board.height:
        return False

    if board.in_bounds(next_x, next_y) and board[next_x, next_y] == EMPTY:
        board[ball.x, ball.y] = EMPTY
        ball.x, ball.y = next_x, next_y
        board[next_x, next_y] = BALL
    elif next_y < 0 and not 0 <= next_x < board.width:
        # outside on both axes: wedged in a top corner
        ball.x_direction = -ball.x_direction
        ball.y_direction = -ball.y_direction
    elif not 0 <= next_x < board.width:
        ball.x_direction = -ball.x_direction
    elif next_y < 0:
        ball.y_direction = -ball.y_direction
    else:
        tile = board[next_x, next_y]
        if tile.kind is TileKind.PADDLE:
            ball.y_direction = -ball.y_direction
            if rng.randrange(2) == 0:
                ball.x_direction = -ball.x_direction
            ball.x_velocity = rng.randrange(*BOUNCE_VELOCITY)
            ball.y_velocity = rng.randrange(*BOUNCE_VELOCITY)
        elif tile.is_block:
            session.destroy_block(next_x, next_y)
            if rng.randrange(2) == 0:
                ball.x_direction = -ball.x_direction
            if rng.randrange(2) == 0:
                ball.y_direction = -ball.y_direction

    return True
