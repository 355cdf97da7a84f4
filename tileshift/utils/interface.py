"""
Abstract collaborators of the game loop: where key presses come from and where the board is drawn.

The board engine depends on neither, so the loop can run headless with any implementation.
"""

from abc import ABC, abstractmethod

from numpy import ndarray


class InputSource(ABC):
    """
    Source of key presses.

    Used as a context manager: ``setup`` runs on enter and ``teardown`` on exit, even on error.
    """

    @abstractmethod
    def setup(self) -> None:
        """Prepare the device for reading keys."""

    @abstractmethod
    def teardown(self) -> None:
        """Restore the device."""

    @abstractmethod
    def read_key(self) -> str:
        """
        Block until a key is pressed.

        Returns
        -------
        str
            Sequence name for special keys (e.g. ``KEY_UP``), the character itself otherwise.
        """

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.teardown()


class Renderer(ABC):
    """Destination of the game display."""

    @abstractmethod
    def draw_score(self, score: int) -> None:
        """
        Draw the score.

        Parameters
        ----------
        score : int
            Current score.
        """

    @abstractmethod
    def draw_board(self, board: ndarray) -> None:
        """
        Draw the game board.

        Parameters
        ----------
        board : ndarray
            Current game board, 0 for empty cells.
        """
