"""Paddle — position, steering and the one-column-per-step mover."""

from dataclasses import dataclass

from ascii_breakout.board import EMPTY, PADDLE, Board

PADDLE_MAX_LEN = 20
PADDLE_MIN_LEN = 10


def paddle_length(level: int) -> int:
    """Two columns shorter every three levels, never below the minimum."""
    return max(PADDLE_MAX_LEN - 2 * (level // 3), PADDLE_MIN_LEN)


def paddle_row(height: int) -> int:
    return (11 * height) // 12


@dataclass
class Paddle:
    x: int  # left-most column
    y: int
    length: int
    period: int = 4  # frames per one-column step
    direction: int = 0
    last_direction: int = 0  # direction saved while frozen

    def cells(self) -> range:
        return range(self.x, self.x + self.length)

    def recenter(self, width: int) -> None:
        self.x = (width - self.length) // 2
        self.direction = 0
        self.last_direction = 0

    def steer(self, direction: int) -> None:
        self.direction = direction
        self.last_direction = 0

    def toggle_freeze(self) -> None:
        """Stop in place, or resume in the direction held before stopping."""
        if self.direction:
            self.last_direction = self.direction
            self.direction = 0
        else:
            self.direction = self.last_direction
            self.last_direction = 0


def move_paddle(paddle: Paddle, board: Board) -> bool:
    """Shift the paddle one column in its direction. Returns False if it stayed put.

    The paddle stops against either wall, and refuses to step onto a cell
    that is not empty (the ball skimming past the paddle row).
    """
    if paddle.direction < 0:
        lead, trail = paddle.x - 1, paddle.x + paddle.length - 1
    elif paddle.direction > 0:
        lead, trail = paddle.x + paddle.length, paddle.x
    else:
        return False

    if not 0 <= lead < board.width or board[lead, paddle.y] != EMPTY:
        return False

    board[lead, paddle.y] = PADDLE
    board[trail, paddle.y] = EMPTY
    paddle.x += 1 if paddle.direction > 0 else -1
    return True
