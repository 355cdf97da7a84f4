# -*- coding: utf-8 -*-
"""
Python implementation of a terminal tile shifting game session.

This module provides the `GameSession` class, which owns the board and score of a running game.
"""

from .session import GameSession

__all__ = ["GameSession"]
