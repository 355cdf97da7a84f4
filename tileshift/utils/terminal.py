# -*- coding: utf-8 -*-
"""
Terminal User Interface for the Tile Shifting Game

This module provides a terminal front end for the game. It relies on blessed to switch the terminal into
raw mode, hide the cursor, read key presses and draw the colored board at fixed positions.
"""
import logging
from contextlib import ExitStack

from blessed import Terminal
from numpy import ndarray

from tileshift.utils.interface import InputSource, Renderer

try:
    from termios import error as _TermiosError

    _TERMINAL_ERRORS: tuple[type[Exception], ...] = (OSError, _TermiosError)
except ImportError:  # Windows has no termios
    _TERMINAL_ERRORS = (OSError,)

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be set up, drawn on, read from or restored."""


class TerminalBoard(InputSource, Renderer):
    """
    A class for reading keys and drawing the game board in a terminal.

    Methods
    -------
    setup()
        Enter raw mode, hide the cursor and clear the screen.
    teardown()
        Show the cursor and leave raw mode.
    read_key()
        Block until a key is pressed and return its name.
    draw_score(score: int)
        Draw the score at the top left corner.
    draw_board(board: ndarray)
        Draw every cell as a two-line, colored numeric field.

    Notes
    -----
    - Each cell is a right-aligned four character field split over two lines, two characters each.
    - Cells are three columns apart horizontally and three lines apart vertically.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "black",
        2: "white",
        4: "bright_green",
        8: "bright_blue",
        16: "bright_yellow",
        32: "bright_red",
        64: "bright_magenta",
        128: "bright_cyan",
        2048: "yellow",
    }
    FALLBACK_COLOR = "bright_cyan"
    SCORE_COLOR = "bright_green"

    def __init__(self, terminal: Terminal | None = None):
        """
        Initialize the terminal front end.

        Parameters
        ----------
        terminal : Terminal, optional
            The blessed terminal to use (default is one bound to the standard streams).
        """
        self.term = terminal if terminal is not None else Terminal()
        self._stack: ExitStack | None = None

    @classmethod
    def tile_color(cls, value: int) -> str:
        """
        Get the color name of a tile.

        Parameters
        ----------
        value : int
            Tile value, 0 for an empty cell.

        Returns
        -------
        str
            A blessed color name.
        """
        return cls.COLORS.get(value, cls.FALLBACK_COLOR)

    @staticmethod
    def cell_text(value: int) -> str:
        """
        Format a cell as a right-aligned four character field.

        Parameters
        ----------
        value : int
            Tile value, 0 for an empty cell.

        Returns
        -------
        str
            The field; blank for an empty cell. Values wider than four digits are cut.
        """
        text = str(value) if value else ""
        return text.rjust(4)[:4]

    def _write(self, text: str):
        try:
            self.term.stream.write(text)
            self.term.stream.flush()
        except _TERMINAL_ERRORS as error:
            raise TerminalError(f"cannot draw on terminal: {error}") from error

    def setup(self):
        stack = ExitStack()
        try:
            stack.enter_context(self.term.raw())
            stack.enter_context(self.term.hidden_cursor())
        except _TERMINAL_ERRORS as error:
            stack.close()
            raise TerminalError(f"cannot enter raw mode: {error}") from error

        try:
            self._write(self.term.clear)
        except TerminalError:
            stack.close()
            raise

        self._stack = stack
        _logger.info("Terminal ready (%dx%d)", self.term.width, self.term.height)

    def teardown(self):
        if self._stack is None:
            return

        stack, self._stack = self._stack, None
        try:
            stack.close()
        except _TERMINAL_ERRORS as error:
            raise TerminalError(f"cannot restore terminal: {error}") from error
        self._write("\n")
        _logger.info("Terminal restored")

    def read_key(self) -> str:
        try:
            key = self.term.inkey()
        except _TERMINAL_ERRORS as error:
            raise TerminalError(f"cannot read from terminal: {error}") from error

        if key.is_sequence:
            return key.name
        return str(key)

    def draw_score(self, score: int):
        paint = getattr(self.term, self.SCORE_COLOR)
        self._write(self.term.move_xy(1, 1) + paint(str(score)))

    def draw_board(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        """
        chunks = []
        for x, row in enumerate(board.tolist()):
            for y, value in enumerate(row):
                text = self.cell_text(value)
                paint = getattr(self.term, self.tile_color(value))

                chunks.append(self.term.move_xy(y * 3 + 1, x * 3 + 2) + paint(text[:2]))
                chunks.append(self.term.move_xy(y * 3 + 1, x * 3 + 3) + paint(text[2:]))
        self._write("".join(chunks))
