"""
Move directions for the tile shifting engine and the neighbour rule that drives a shift pass.
"""

from enum import Enum


class Direction(Enum):
    """
    Direction of a shift pass.

    Each member names the step from a cell to the neighbour that feeds it, in ``(x, y)`` grid
    coordinates where ``x`` is the outer (row) index. Tiles travel the opposite way.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        """
        Step from a cell to its feeding neighbour.

        Returns
        -------
        tuple[int, int]
            The ``(dx, dy)`` offset.
        """
        return self.value


def adjacent_cell(x: int, y: int, direction: Direction, size: int) -> tuple[int, int] | None:
    """
    Locate the neighbour that feeds cell ``(x, y)`` for a shift in the given direction.

    Parameters
    ----------
    x : int
        Outer (row) index of the cell.
    y : int
        Inner (column) index of the cell.
    direction : Direction
        Direction of the shift pass.
    size : int
        Size of the square grid.

    Returns
    -------
    tuple[int, int] | None
        Coordinates of the neighbour, or None when it falls outside the grid.
    """
    dx, dy = direction.offset
    nx, ny = x + dx, y + dy
    if 0 <= nx < size and 0 <= ny < size:
        return nx, ny
    return None
