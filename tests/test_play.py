"""
Tests for the blocking game loop and the command line entry point.

The loop runs headless with scripted key presses and a recording renderer.
"""

from unittest import TestCase, main
from unittest.mock import patch

import numpy as np

from tileshift.core.gamemove import Direction
from tileshift.envs.session import GameSession
from tileshift.play import run
from tileshift.play import main as play_main
from tileshift.utils.interface import InputSource, Renderer
from tileshift.utils.terminal import TerminalError


class ScriptedSource(InputSource):
    """Input source replaying a list of key names."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.events = []

    def setup(self):
        self.events.append("setup")

    def teardown(self):
        self.events.append("teardown")

    def read_key(self):
        if not self.keys:
            raise TerminalError("no more keys")
        return self.keys.pop(0)


class RecordingRenderer(Renderer):
    """Renderer keeping a copy of everything drawn."""

    def __init__(self):
        self.scores = []
        self.boards = []

    def draw_score(self, score):
        self.scores.append(score)

    def draw_board(self, board):
        self.boards.append(board.copy())


class FakeTerminalBoard(ScriptedSource, RecordingRenderer):
    """Terminal stand-in for the entry point."""

    instances = []

    def __init__(self, keys=("KEY_LEFT", "q")):
        ScriptedSource.__init__(self, keys)
        RecordingRenderer.__init__(self)
        FakeTerminalBoard.instances.append(self)


class FailingTerminalBoard(FakeTerminalBoard):
    """Terminal stand-in that cannot enter raw mode."""

    def setup(self):
        raise TerminalError("not a tty")


class TestRun(TestCase):
    """Test the game loop against fake collaborators."""

    def setUp(self):
        self.session = GameSession(size=4, seed=0)
        self.renderer = RecordingRenderer()

    def test_quit_immediately(self):
        """Quitting draws once, restores the device and keeps the board."""
        board = self.session.board.copy()
        source = ScriptedSource(["q"])

        score = run(self.session, source, self.renderer)

        self.assertEqual(score, self.session.score)
        self.assertEqual(source.events, ["setup", "teardown"])
        self.assertEqual(len(self.renderer.boards), 1)
        np.testing.assert_array_equal(self.session.board, board)

    def test_move_then_quit(self):
        """Ignored keys do nothing; a direction key plays one full move."""
        source = ScriptedSource(["x", "KEY_UP", "q"])

        with patch.object(self.session, "play", wraps=self.session.play) as play:
            run(self.session, source, self.renderer)

        play.assert_called_once_with(Direction.RIGHT)
        self.assertEqual(np.count_nonzero(self.session.board), 2)

        # ##>: One draw per key read plus one after the move.
        self.assertEqual(len(self.renderer.boards), 4)
        self.assertEqual(self.renderer.scores[-1], self.session.score)

    def test_left_arrow_plays_down(self):
        """The on-screen left arrow drives the engine DOWN direction."""
        source = ScriptedSource(["KEY_LEFT", "h", "q"])

        with patch.object(self.session, "play", wraps=self.session.play) as play:
            run(self.session, source, self.renderer)

        self.assertEqual([c.args[0] for c in play.call_args_list], [Direction.DOWN, Direction.DOWN])

    def test_teardown_on_failure(self):
        """The device is restored when reading fails."""
        source = ScriptedSource(["KEY_DOWN"])

        with self.assertRaises(TerminalError):
            run(self.session, source, self.renderer)
        self.assertEqual(source.events, ["setup", "teardown"])


class TestMain(TestCase):
    """Test the command line entry point."""

    def setUp(self):
        FakeTerminalBoard.instances.clear()

    def test_main(self):
        """The size argument sets the board size and the game runs until quit."""
        with patch("tileshift.play.TerminalBoard", FakeTerminalBoard):
            play_main(["3", "--seed", "1"])

        fake = FakeTerminalBoard.instances[0]
        self.assertEqual(fake.events, ["setup", "teardown"])
        self.assertEqual(fake.boards[-1].shape, (3, 3))
        self.assertEqual(np.count_nonzero(fake.boards[-1]), 2)

    def test_main_terminal_failure(self):
        """A terminal failure aborts with a diagnostic."""
        with patch("tileshift.play.TerminalBoard", FailingTerminalBoard):
            with self.assertRaises(SystemExit) as context:
                play_main([])
        self.assertIn("not a tty", str(context.exception.code))


if __name__ == "__main__":
    main()
