# -*- coding: utf-8 -*-
"""
Play the tile shifting game in a terminal.
"""
import logging
from typing import Sequence

from tileshift.core import Direction
from tileshift.envs import GameSession
from tileshift.utils import (
    QUIT,
    GameConfig,
    InputSource,
    Renderer,
    TerminalBoard,
    TerminalError,
    parse_arguments,
    resolve_key,
)

_logger = logging.getLogger(__name__)


def redraw(renderer: Renderer, session: GameSession):
    """
    Redraw the score and the game board.

    Parameters
    ----------
    renderer: Renderer
        Where to draw the game

    session: GameSession
        The running game
    """
    renderer.draw_score(session.score)
    renderer.draw_board(session.board)


def step(session: GameSession, renderer: Renderer, direction: Direction):
    """
    Play one move and redraw.

    Parameters
    ----------
    session: GameSession
        The running game

    renderer: Renderer
        Where to draw the game

    direction: Direction
        Direction to play
    """
    session.play(direction)
    redraw(renderer, session)


def run(session: GameSession, source: InputSource, renderer: Renderer) -> int:
    """
    Blocking game loop: read a key, play it, redraw, until a quit key is pressed.

    Parameters
    ----------
    session: GameSession
        The running game

    source: InputSource
        Where key presses come from

    renderer: Renderer
        Where to draw the game

    Returns
    -------
    int
        Final score.
    """
    with source:
        while True:
            redraw(renderer, session)
            action = resolve_key(source.read_key())

            if action == QUIT:
                break
            if isinstance(action, Direction):
                step(session, renderer, action)

    _logger.info("Game over by quit, score=%d", session.score)
    return session.score


def configure_logging(config: GameConfig):
    """Log to a file when asked; the terminal screen is owned by the game."""
    if config.log_file is None:
        return
    logging.basicConfig(
        filename=config.log_file,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None):
    config = parse_arguments(argv)
    configure_logging(config)

    session = GameSession(size=config.size, seed=config.seed)
    board = TerminalBoard()
    try:
        run(session, board, board)
    except TerminalError as error:
        _logger.exception("Terminal failure")
        raise SystemExit(f"tileshift: {error}") from error


if __name__ == "__main__":
    main()
