# -*- coding: utf-8 -*-
"""
Command line configuration.
"""
from argparse import ArgumentParser
from dataclasses import dataclass
from typing import Sequence

DEFAULT_SIZE = 4
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class GameConfig:
    """Data needed to start a game."""

    size: int = DEFAULT_SIZE
    seed: int | None = None
    log_file: str | None = None
    log_level: str = "INFO"


def parse_board_size(value: str | None) -> int:
    """
    Parse the board size argument.

    Parameters
    ----------
    value : str, optional
        Raw command line value.

    Returns
    -------
    int
        The parsed size, or ``DEFAULT_SIZE`` when the value is missing, unparseable or not positive.
    """
    if value is None:
        return DEFAULT_SIZE
    try:
        size = int(value)
    except ValueError:
        return DEFAULT_SIZE
    return size if size > 0 else DEFAULT_SIZE


def parse_arguments(argv: Sequence[str] | None = None) -> GameConfig:
    """
    Build the game configuration from command line arguments.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments without the program name (default is ``sys.argv[1:]``).

    Returns
    -------
    GameConfig
        The configuration. Unknown arguments are ignored.
    """
    parser = ArgumentParser(prog="tileshift", description="Sliding tile merge puzzle in the terminal.")
    parser.add_argument("size", nargs="?", default=None, help=f"board size (default {DEFAULT_SIZE})")
    parser.add_argument("--seed", type=int, default=None, help="random generator seed")
    parser.add_argument("--log-file", type=str, default=None, help="write logs to this file")
    parser.add_argument(
        "--log-level", type=str.upper, default="INFO", choices=LOG_LEVELS, help="logging level (default INFO)"
    )
    args, _ = parser.parse_known_args(argv)

    return GameConfig(
        size=parse_board_size(args.size),
        seed=args.seed,
        log_file=args.log_file,
        log_level=args.log_level,
    )
