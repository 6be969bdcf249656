"""Game director — levels, lives and the per-frame update loop."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ascii_breakout.actions import Action, action_for_key
from ascii_breakout.ball import Ball, step_ball
from ascii_breakout.board import (
    BALL, EMPTY, PADDLE, Board, Tile, generate_board, max_block_row,
)
from ascii_breakout.config import AppConfig
from ascii_breakout.paddle import Paddle, move_paddle, paddle_length, paddle_row

INTRO_MESSAGE = (
    "ASCII Breakout\n"
    "by Sebastian LaVine\n"
    "Press j and k to move the paddle\n"
    "p pauses, space freezes the paddle, q quits\n"
)
LIFE_MESSAGE = "Level: {level}\nLives remaining: {lives}\nPress any key to continue"
LEVEL_WON_MESSAGE = "Level {level} complete!\nPress any key to continue..."
GAME_OVER_MESSAGE = "Game over!\nScore: {score}\nLevel: {level}\nPress any key to quit."


class Display(Protocol):
    """What the director needs from the terminal (see renderer.CursesDisplay)."""

    def draw_screen(self, board: Board, level: int, score: int, lives: int) -> None: ...
    def draw_tile(self, x: int, y: int, tile: Tile) -> None: ...
    def draw_footer(self, level: int, score: int, lives: int) -> None: ...
    def show_message(self, text: str) -> None: ...
    def refresh(self) -> None: ...
    def poll_key(self) -> int | None: ...
    def wait_key(self) -> int: ...


class Phase(Enum):
    LEVEL_START = "level_start"
    LIFE_START = "life_start"
    PLAYING = "playing"
    LIFE_LOST = "life_lost"
    LEVEL_WON = "level_won"
    LEVEL_END = "level_end"


class FrameResult(Enum):
    CONTINUE = "continue"
    LIFE_LOST = "life_lost"
    LEVEL_WON = "level_won"
    QUIT = "quit"


class Outcome(Enum):
    GAME_OVER = "game_over"
    QUIT = "quit"


def bonus_lives(level: int) -> int:
    """Extra lives handed out at the start of a level.

    Generous early on, tapering off until level 60, none on level 1.
    """
    if level <= 1:
        return 0
    if level < 10:
        return 2
    if level < 20:
        return 1
    if level % 2 == 0 and level < 40:
        return 1
    if level % 4 == 0 and level < 60:
        return 1
    return 0


@dataclass
class Session:
    """State carried across lives and levels for one run."""

    board: Board
    rng: random.Random
    level: int = 1
    score: int = 0
    lives: int = 5
    blocks_left: int = 0
    block_points: int = 10

    def destroy_block(self, x: int, y: int) -> None:
        self.board.destroy_block(x, y)
        self.blocks_left -= 1
        self.score += self.block_points


class Game:
    """Drives the level -> life -> frame loop against a Display."""

    def __init__(self, config: AppConfig, rng: random.Random | None = None,
                 sleep: Callable[[float], None] = time.sleep,
                 display: Display | None = None):
        self.config = config
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.display = display
        self.session = Session(
            board=Board(config.board.width, config.board.height),
            rng=self.rng,
            lives=config.game.starting_lives,
            block_points=config.game.block_points,
        )
        self.paddle: Paddle | None = None
        self.ball: Ball | None = None
        self.bottom_block_row = 0
        self.frame = 0
        self.paused = False

    # -- state machine ------------------------------------------------------

    def run(self, start_level: int = 1) -> Outcome:
        """Play from start_level until the lives run out or the player quits."""
        self.session.level = start_level
        phase = Phase.LEVEL_START
        while True:
            if phase is Phase.LEVEL_START:
                self.start_level()
                phase = Phase.LIFE_START
            elif phase is Phase.LIFE_START:
                self.start_life()
                self.announce(self._life_message())
                phase = Phase.PLAYING
            elif phase is Phase.PLAYING:
                result = self.play()
                if result is FrameResult.QUIT:
                    return Outcome.QUIT
                phase = Phase.LIFE_LOST if result is FrameResult.LIFE_LOST else Phase.LEVEL_WON
            elif phase is Phase.LIFE_LOST:
                self.session.lives -= 1
                phase = Phase.LIFE_START if self.session.lives > 0 else Phase.LEVEL_END
            elif phase is Phase.LEVEL_WON:
                self.announce(LEVEL_WON_MESSAGE.format(level=self.session.level), redraw=False)
                self.session.level += 1
                phase = Phase.LEVEL_START
            elif phase is Phase.LEVEL_END:
                self.announce(
                    GAME_OVER_MESSAGE.format(score=self.session.score, level=self.session.level),
                    redraw=False,
                )
                return Outcome.GAME_OVER

    def start_level(self):
        """Size the paddle, hand out bonus lives and generate the board."""
        s = self.session
        width, height = self.config.board.width, self.config.board.height
        length = paddle_length(s.level)
        self.paddle = Paddle(
            x=(width - length) // 2,
            y=paddle_row(height),
            length=length,
            period=self.config.game.paddle_period,
        )
        self.bottom_block_row = max_block_row(s.level, height)
        self.ball = self._spawn_ball()
        s.lives += bonus_lives(s.level)
        s.blocks_left = generate_board(s.board, s.level, self.paddle, self.ball, self.rng)

    def start_life(self):
        """Respawn the ball and recenter the paddle."""
        board = self.session.board
        board[self.ball.x, self.ball.y] = EMPTY
        self.ball = self._spawn_ball()
        board[self.ball.x, self.ball.y] = BALL

        self.paddle.recenter(self.config.board.width)
        board.clear_row(self.paddle.y)
        for x in self.paddle.cells():
            board[x, self.paddle.y] = PADDLE

        self.frame = 0
        self.paused = False

    def _spawn_ball(self) -> Ball:
        x = self.config.board.width // 2
        y = (self.bottom_block_row + self.paddle.y) // 2
        return Ball.spawn(x, y, self.rng)

    def _life_message(self) -> str:
        text = LIFE_MESSAGE.format(level=self.session.level, lives=self.session.lives)
        if self.session.level == 1:
            return INTRO_MESSAGE + text
        return text

    # -- frames -------------------------------------------------------------

    def play(self) -> FrameResult:
        """Run frames until the life ends, the level is cleared or the player quits."""
        tick = self.config.game.tick_ms / 1000
        while True:
            self.sleep(tick)
            self.frame += 1
            result = self.step_frame(action_for_key(self.display.poll_key()))
            if result is not FrameResult.CONTINUE:
                return result

    def step_frame(self, action: Action | None) -> FrameResult:
        """Apply one input action and advance paddle and ball by one frame."""
        s = self.session
        if action is Action.QUIT:
            return FrameResult.QUIT
        if action is Action.PAUSE:
            self.paused = not self.paused
        elif action is Action.REDRAW:
            self.redraw()
        elif not self.paused:
            self._steer(action)

        if self.paused:
            return FrameResult.CONTINUE

        if self.paddle.direction and self.frame % self.paddle.period == 0:
            move_paddle(self.paddle, s.board)

        score = s.score
        in_play = step_ball(self.ball, s, self.frame)
        self._flush(footer=s.score != score)

        if not in_play:
            return FrameResult.LIFE_LOST
        if s.blocks_left == 0:
            return FrameResult.LEVEL_WON
        return FrameResult.CONTINUE

    def _steer(self, action: Action | None):
        if action is Action.LEFT:
            self.paddle.steer(-1)
        elif action is Action.RIGHT:
            self.paddle.steer(1)
        elif action is Action.FREEZE:
            self.paddle.toggle_freeze()

    # -- display ------------------------------------------------------------

    def _flush(self, footer: bool = False):
        """Paint the cells changed since the last flush."""
        board = self.session.board
        changed = board.take_dirty()
        for x, y in changed:
            self.display.draw_tile(x, y, board[x, y])
        if footer:
            self.display.draw_footer(self.session.level, self.session.score, self.session.lives)
        if changed or footer:
            self.display.refresh()

    def redraw(self):
        s = self.session
        s.board.take_dirty()
        self.display.draw_screen(s.board, s.level, s.score, s.lives)

    def announce(self, text: str, redraw: bool = True):
        """Show a centred message and wait for a key."""
        if redraw:
            self.redraw()
        self.display.show_message(text)
        self.display.wait_key()
        if redraw:
            self.redraw()
