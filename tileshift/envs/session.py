"""Game session owning the board, the score and the random generator."""

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from tileshift.core.gameboard import new_board, play_move, spawn_random_tile
from tileshift.core.gamemove import Direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    Tile shifting game session.

    This class holds the state of one game: the board, the score and the random generator used for
    spawns. The board engine functions receive the board explicitly from here.
    """

    # ##: Current game state.
    _board: ndarray | None = None
    _score: int = 0

    def __init__(self, size: int = 4, seed: int | None = None):
        """
        Initialize the session and spawn the first tile.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        seed : int, optional
            Random number generator seed for reproducibility.
        """
        self._size = size
        self._rng: Generator = default_rng(seed)

        self.reset()

    @property
    def size(self) -> int:
        """
        Get the size of the square grid.

        Returns
        -------
        int
            Number of rows (and columns), fixed for the life of the session.
        """
        return self._size

    @property
    def board(self) -> ndarray:
        """
        Get the current game board.

        Returns
        -------
        ndarray
            The board as a 2D numpy array, 0 for empty cells.
        """
        return self._board

    @property
    def score(self) -> int:
        """
        Get the current score.

        Returns
        -------
        int
            Sum of every spawned tile and every merge result so far.
        """
        return self._score

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start over with an empty board holding one random tile.

        Parameters
        ----------
        seed : int, optional
            Re-seed the random generator before spawning.

        Returns
        -------
        ndarray
            The new game board.

        Notes
        -----
        The value of the first tile is counted in the score.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = new_board(self._size)
        self._score = spawn_random_tile(self._board, self._rng)

        _logger.info('New %dx%d game, score=%d', self._size, self._size, self._score)
        return self._board

    def play(self, direction: Direction) -> int:
        """
        Play one full move in the given direction.

        Parameters
        ----------
        direction : Direction
            Direction of the move.

        Returns
        -------
        int
            Score gained by the move (merges and the spawned tile).
        """
        gained = play_move(self._board, direction, self._rng)
        self._score += gained

        _logger.debug('Move %s gained %d, score=%d', direction.name, gained, self._score)
        return gained
