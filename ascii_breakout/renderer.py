"""curses renderer — play field, footer, messages and keyboard polling."""

import curses

from ascii_breakout.board import Board, Tile, TileKind

TITLE = "ASCII BREAKOUT"
LIVES_LABEL = "<3:"
LEVEL_LABEL = "Level:"
SCORE_LABEL = "Score:"
FOOTER_COL = 3
FOOTER_GAP = 5

# style name -> (foreground, background, bold); -1 is the terminal default
STYLES = {
    "frame": (curses.COLOR_GREEN, -1, False),
    "paddle": (curses.COLOR_MAGENTA, curses.COLOR_MAGENTA, False),
    "red": (curses.COLOR_BLACK, curses.COLOR_RED, False),
    "blue": (curses.COLOR_BLACK, curses.COLOR_BLUE, False),
    "green": (curses.COLOR_BLACK, curses.COLOR_GREEN, False),
    "title": (curses.COLOR_CYAN, -1, False),
    "lives": (curses.COLOR_MAGENTA, -1, True),
    "level": (curses.COLOR_YELLOW, -1, False),
    "score": (curses.COLOR_CYAN, -1, True),
}


def tile_glyph(tile: Tile, x: int) -> str:
    """Character for a tile. Block halves alternate ( and ) to show pairs."""
    if tile.kind is TileKind.BALL:
        return "O"
    if tile.is_block:
        return "(" if x % 2 == 1 else ")"
    return " "


def tile_style(tile: Tile) -> str | None:
    """Style name for a tile, or None for the terminal default."""
    if tile.kind is TileKind.PADDLE:
        return "paddle"
    if tile.is_block:
        return tile.color.value
    return None


def required_size(width: int, height: int) -> tuple[int, int]:
    """Terminal (columns, rows) needed for a board plus frame and footer."""
    return width + 2, height + 3


def footer_segments(level: int, score: int, lives: int) -> list[tuple[int, str, str | None]]:
    """Footer pieces as (column, text, style), left to right."""
    fields = [
        (TITLE, "title", None),
        (LIVES_LABEL, "lives", f"{lives:02d}"),
        (LEVEL_LABEL, "level", f"{level:02d}"),
        (SCORE_LABEL, "score", f"{score:08d}"),
    ]
    segments = []
    col = FOOTER_COL
    for label, style, value in fields:
        segments.append((col, label, style))
        col += len(label)
        if value is not None:
            segments.append((col, value, None))
            col += len(value)
        col += FOOTER_GAP
    return segments


def message_lines(text: str, width: int, height: int) -> list[tuple[int, int, str]]:
    """Centre each line of text on the field, as (row, column, line)."""
    placed = []
    for i, line in enumerate(text.split("\n")):
        line = line[:width]
        placed.append((height // 2 + i, max(0, width // 2 - len(line) // 2), line))
    return placed


class CursesDisplay:
    """Render sink, text sink and key source over a curses window.

    Field cell (x, y) lives at screen row y + 1, column x + 1, inside a
    one-character frame; the footer sits on the row below the frame.
    """

    def __init__(self, screen, width: int, height: int):
        self.screen = screen
        self.width = width
        self.height = height
        self._attrs: dict[str, int] = {}
        self._setup()

    def _setup(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        self.screen.nodelay(True)
        self.screen.keypad(True)
        if not curses.has_colors():
            self._attrs["paddle"] = curses.A_REVERSE
            return
        curses.start_color()
        curses.use_default_colors()
        for pair, (name, (fg, bg, bold)) in enumerate(STYLES.items(), start=1):
            curses.init_pair(pair, fg, bg)
            self._attrs[name] = curses.color_pair(pair) | (curses.A_BOLD if bold else 0)

    def _attr(self, style: str | None) -> int:
        if style is None:
            return curses.A_NORMAL
        return self._attrs.get(style, curses.A_NORMAL)

    # -- drawing ------------------------------------------------------------

    def _put(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL):
        """Write text, dropping it if the terminal has shrunk past (row, col)."""
        try:
            self.screen.addstr(row, col, text, attr)
        except curses.error:
            pass  # off-screen after a resize; the next full redraw repaints it

    def draw_tile(self, x: int, y: int, tile: Tile):
        self._put(y + 1, x + 1, tile_glyph(tile, x), self._attr(tile_style(tile)))

    def draw_frame(self):
        attr = self._attr("frame")
        self._put(0, 1, "_" * self.width, attr)
        for row in range(1, self.height + 1):
            self._put(row, 0, "{", attr)
            self._put(row, self.width + 1, "}", attr)
        self._put(self.height + 1, 0, "{" + "_" * self.width + "}", attr)

    def draw_footer(self, level: int, score: int, lives: int):
        row = self.height + 2
        for col, text, style in footer_segments(level, score, lives):
            self._put(row, col, text, self._attr(style))

    def draw_screen(self, board: Board, level: int, score: int, lives: int):
        """Repaint everything: frame, footer and every board cell."""
        self.screen.erase()
        self.draw_frame()
        self.draw_footer(level, score, lives)
        for x, y, tile in board.cells():
            self.draw_tile(x, y, tile)
        self.refresh()

    def show_message(self, text: str):
        for row, col, line in message_lines(text, self.width, self.height):
            self._put(row + 1, col + 1, line)
        self.refresh()

    def refresh(self):
        self.screen.refresh()

    # -- input --------------------------------------------------------------

    def poll_key(self) -> int | None:
        """Most recent key pressed since the last poll, without blocking."""
        key = None
        while (ch := self.screen.getch()) != -1:
            key = ch
        return key

    def wait_key(self) -> int:
        """Block until any key is pressed."""
        self.screen.nodelay(False)
        try:
            return self.screen.getch()
        finally:
            self.screen.nodelay(True)
