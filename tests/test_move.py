from unittest import TestCase, main

from tileshift.core.gamemove import Direction, adjacent_cell


class TestGameMove(TestCase):
    def test_neighbour_offsets(self):
        """
        Test each direction feeds a cell from the expected neighbour.
        """
        self.assertEqual(adjacent_cell(1, 1, Direction.UP, 4), (1, 0))
        self.assertEqual(adjacent_cell(1, 1, Direction.DOWN, 4), (1, 2))
        self.assertEqual(adjacent_cell(1, 1, Direction.LEFT, 4), (0, 1))
        self.assertEqual(adjacent_cell(1, 1, Direction.RIGHT, 4), (2, 1))

    def test_edges(self):
        """
        Test neighbours outside the grid are reported as missing.
        """
        self.assertIsNone(adjacent_cell(0, 0, Direction.UP, 4))
        self.assertIsNone(adjacent_cell(0, 0, Direction.LEFT, 4))
        self.assertIsNone(adjacent_cell(3, 3, Direction.DOWN, 4))
        self.assertIsNone(adjacent_cell(3, 3, Direction.RIGHT, 4))
        self.assertIsNone(adjacent_cell(0, 0, Direction.RIGHT, 1))


if __name__ == '__main__':
    main()
