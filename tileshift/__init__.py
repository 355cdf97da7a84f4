# -*- coding: utf-8 -*-
"""
Sliding tile merge puzzle played in a terminal.
"""

from .core import Direction, play_move, shift, spawn_random_tile
from .envs import GameSession

__all__ = ["Direction", "GameSession", "shift", "spawn_random_tile", "play_move"]
