# -*- coding: utf-8 -*-
"""
This module provides the presentation side of the game.

It includes the abstract input source and renderer, the keyboard controls, the command line configuration
and a `TerminalBoard` class drawing the game in a terminal.
"""

from .config import DEFAULT_SIZE, GameConfig, parse_arguments, parse_board_size
from .controls import QUIT, resolve_key
from .interface import InputSource, Renderer
from .terminal import TerminalBoard, TerminalError

__all__ = [
    "DEFAULT_SIZE",
    "GameConfig",
    "parse_arguments",
    "parse_board_size",
    "QUIT",
    "resolve_key",
    "InputSource",
    "Renderer",
    "TerminalBoard",
    "TerminalError",
]
