# -*- coding: utf-8 -*-
"""
This module provides the board engine of the tile shifting game.

It includes the shift directions and their neighbour rule, single shift passes, random tile spawning
and full player moves. All functions mutate an explicitly passed board.
"""

from .gameboard import TILE_SPAWN_PROBS, empty_cells, new_board, play_move, shift, spawn_random_tile
from .gamemove import Direction, adjacent_cell

__all__ = [
    "Direction",
    "adjacent_cell",
    "TILE_SPAWN_PROBS",
    "new_board",
    "empty_cells",
    "shift",
    "spawn_random_tile",
    "play_move",
]
