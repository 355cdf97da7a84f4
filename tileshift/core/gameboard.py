"""
Core functionality of the tile shifting engine: shift passes, tile spawning and full moves.

Every function works on an explicitly passed board and mutates it in place. Empty cells hold 0.
"""

import logging

from numpy import argwhere, int64, ndarray, zeros
from numpy.random import Generator

from tileshift.core.gamemove import Direction, adjacent_cell

# ##>: Tile spawn probabilities (75% for 2, 25% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.75, 4: 0.25}

# ##>: Pre-computed tile values and probabilities for sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def new_board(size: int) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int
        The size of the square grid.

    Returns
    -------
    ndarray
        A ``(size, size)`` array of zeros.

    Raises
    ------
    ValueError
        If size is not a positive integer.
    """
    if size <= 0:
        raise ValueError(f'size must be > 0, got {size}')
    return zeros((size, size), dtype=int64)


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the empty cells of the board in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        Coordinates ``(x, y)`` of every empty cell.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def shift(board: ndarray, direction: Direction) -> int:
    """
    Apply a single shift pass to the board, in place.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    direction : Direction
        Direction of the pass.

    Returns
    -------
    int
        Score gained by the merges of this pass.

    Notes
    -----
    - Cells are visited in row-major order and each one looks at its feeding neighbour
      (see ``adjacent_cell``).
    - An occupied cell absorbs an equal neighbour and doubles; an empty cell pulls the neighbour in.
    - The board is mutated during the scan, so later cells see the effects of earlier ones.
    - Tiles move by at most one cell per pass; a full slide takes ``size - 1`` passes.
    """
    size = board.shape[0]
    score = 0

    for x in range(size):
        for y in range(size):
            neighbour = adjacent_cell(x, y, direction, size)
            if neighbour is None or board[neighbour] == 0:
                continue

            value = int(board[neighbour])
            if board[x, y] == 0:
                # ##: Pull the neighbour in.
                board[x, y] = value
                board[neighbour] = 0
            elif board[x, y] == value:
                # ##: Absorb the equal neighbour.
                board[x, y] = value * 2
                board[neighbour] = 0
                score += value * 2

    return score


def spawn_random_tile(board: ndarray, rng: Generator) -> int:
    """
    Place a new tile (2 or 4) on a random empty cell, in place.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    rng : Generator
        Random number generator used to pick the cell and the value.

    Returns
    -------
    int
        Value of the new tile, i.e. the score it adds, or 0 when the board is full.

    Notes
    -----
    - The cell is drawn uniformly among the empty cells, listed in row-major order.
    - New tiles have a 75% chance of being 2 and a 25% chance of being 4.
    - A full board is left untouched.
    """
    available_cells = empty_cells(board)
    if not available_cells:
        return 0

    x, y = available_cells[int(rng.choice(len(available_cells)))]
    value = int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))
    board[x, y] = value

    _logger.debug('Spawned %d at (%d, %d)', value, x, y)
    return value


def play_move(board: ndarray, direction: Direction, rng: Generator) -> int:
    """
    Play one full player move: ``size - 1`` shift passes followed by one spawn.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    direction : Direction
        Direction of the move.
    rng : Generator
        Random number generator for the spawn.

    Returns
    -------
    int
        Total score gained by the merges and the spawned tile.

    Notes
    -----
    A tile is spawned after every move, even when the passes left the board unchanged.
    """
    score = 0
    for _ in range(board.shape[0] - 1):
        score += shift(board, direction)
    return score + spawn_random_tile(board, rng)
