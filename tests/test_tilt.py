"""
Tests for tilt resolution: slides, merges, locking and change reporting.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core.grid import Grid
from game2048.core.side import Side
from game2048.core.tilt import tilt_column, tilt_grid

generator = np.random.default_rng(42)


def generate_random_board(size: int = 4) -> np.ndarray:
    """Generate a random 2048 game board."""
    board = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16, 32, 64, 128], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board


def merge_toward_top(values: list[int]) -> list[int]:
    """Resolve a bottom-to-top column by merging pairs greedily from the top."""
    non_zero = [value for value in reversed(values) if value]
    result = []
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            result.append(non_zero[i] * 2)
            i += 2
        else:
            result.append(non_zero[i])
            i += 1
    result += [0] * (len(values) - len(result))
    return list(reversed(result))


def column_board(values: list[int]) -> Grid:
    """Build a 4x4 board whose column 0 holds ``values`` bottom to top."""
    raw = np.zeros((4, 4), dtype=np.int64)
    raw[:, 0] = values
    return Grid.from_values(raw)


class TestTiltColumn(TestCase):
    """Test the merge rules on a single column tilted north."""

    def assert_column(self, values, expected, score):
        grid = column_board(values)
        result = tilt_grid(grid, Side.NORTH)
        np.testing.assert_array_equal(grid.to_array()[:, 0], expected)
        self.assertEqual(result.score, score)

    def test_single_tile_slides_to_top(self):
        self.assert_column([2, 0, 0, 0], [0, 0, 0, 2], 0)

    def test_three_in_a_row(self):
        """Only the two leading tiles merge; the trailing one slides without merging."""
        self.assert_column([2, 2, 2, 0], [0, 0, 2, 4], 4)

    def test_four_in_a_row(self):
        """Four equal tiles merge into two."""
        self.assert_column([2, 2, 2, 2], [0, 0, 4, 4], 8)

    def test_merged_tile_does_not_merge_again(self):
        """A merged 4 does not absorb the 4 sliding in behind it."""
        self.assert_column([4, 2, 2, 0], [0, 0, 4, 4], 4)
        self.assert_column([2, 2, 4, 0], [0, 0, 4, 4], 4)

    def test_two_pairs(self):
        self.assert_column([2, 2, 4, 4], [0, 0, 4, 8], 12)

    def test_merge_across_gap(self):
        self.assert_column([2, 0, 0, 2], [0, 0, 0, 4], 4)

    def test_blocked_by_different_value(self):
        self.assert_column([8, 4, 4, 8], [0, 8, 8, 8], 8)

    def test_full_column_without_merge(self):
        self.assert_column([2, 4, 8, 16], [2, 4, 8, 16], 0)

    def test_tilt_column_reports_merges(self):
        """The column helper returns the tiles created by merges."""
        grid = column_board([2, 2, 0, 0])
        changed, merges = tilt_column(grid.view(Side.NORTH), 0)
        self.assertTrue(changed)
        self.assertEqual([(tile.value, tile.column, tile.row) for tile in merges], [(4, 0, 3)])


class TestTiltSides(TestCase):
    """Test that the perspective transform applies the rules in every direction."""

    def test_south(self):
        grid = Grid.from_values(np.array([[0, 0, 0, 0], [2, 0, 0, 0], [2, 0, 0, 0], [2, 0, 0, 0]]))
        result = tilt_grid(grid, Side.SOUTH)
        np.testing.assert_array_equal(grid.to_array()[:, 0], [4, 2, 0, 0])
        self.assertEqual(result.score, 4)

    def test_east(self):
        grid = Grid.from_values([[2, 2, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = tilt_grid(grid, Side.EAST)
        np.testing.assert_array_equal(grid.to_array()[0], [0, 0, 4, 4])
        self.assertEqual(result.score, 4)

    def test_west(self):
        grid = Grid.from_values([[0, 4, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = tilt_grid(grid, Side.WEST)
        np.testing.assert_array_equal(grid.to_array()[0], [4, 4, 0, 0])
        self.assertEqual(result.score, 4)

    def test_matches_greedy_merge_on_random_boards(self):
        """Every side agrees with a greedy pairwise merge of each line."""
        for _ in range(50):
            raw = generate_random_board()
            for side in Side:
                grid = Grid.from_values(raw)
                tilt_grid(grid, side)

                # ##>: Rotate so that the motion is toward the top row (last index).
                k = {Side.NORTH: 0, Side.WEST: 1, Side.SOUTH: 2, Side.EAST: 3}[side]
                rotated = np.rot90(raw, k=k)
                expected = np.column_stack([merge_toward_top(list(rotated[:, c])) for c in range(4)])
                np.testing.assert_array_equal(np.rot90(grid.to_array(), k=k), expected)


class TestTiltInvariants(TestCase):
    """Test conservation, single merges and change reporting."""

    def test_score_conservation(self):
        """Merges keep the sum of tile values, and the score gained is the sum of the merged tiles."""
        for _ in range(50):
            raw = generate_random_board()
            for side in Side:
                grid = Grid.from_values(raw)
                result = tilt_grid(grid, side)
                self.assertEqual(int(grid.to_array().sum()), int(raw.sum()))
                self.assertEqual(result.score, sum(tile.value for tile in result.merges))

    def test_at_most_one_merge_per_tile(self):
        """No cell receives two merges during one tilt."""
        for _ in range(50):
            raw = generate_random_board()
            for side in Side:
                result = tilt_grid(Grid.from_values(raw), side)
                cells = [(tile.column, tile.row) for tile in result.merges]
                self.assertEqual(len(cells), len(set(cells)))

    def test_tiles_match_their_cells(self):
        """Every stored tile carries the coordinates of its cell after a tilt."""
        for side in Side:
            grid = Grid.from_values(generate_random_board())
            tilt_grid(grid, side)
            for tile in grid.tiles():
                self.assertIs(grid.tile(tile.column, tile.row), tile)

    def test_repeated_tilt_only_changes_by_merging(self):
        """After a tilt, tiles are packed: a second tilt changes the board only through new merges."""
        for _ in range(20):
            raw = generate_random_board()
            for side in Side:
                grid = Grid.from_values(raw)
                first = tilt_grid(grid, side)
                second = tilt_grid(grid, side)
                self.assertEqual(second.changed, bool(second.merges))
                if not first.merges:
                    self.assertFalse(second.changed)

    def test_repeated_tilt_without_merge(self):
        grid = column_board([2, 0, 4, 0])
        self.assertTrue(tilt_grid(grid, Side.NORTH).changed)
        self.assertFalse(tilt_grid(grid, Side.NORTH).changed)

    def test_tilt_is_logged_with_side(self):
        with self.assertLogs('game2048.core.tilt', level='DEBUG') as logs:
            tilt_grid(column_board([2, 2, 0, 0]), Side.WEST)
        self.assertIn('Tilt WEST', logs.output[0])

    def test_stationary_slides(self):
        """Tiles that stay in place count as a change only when requested."""
        self.assertFalse(tilt_grid(column_board([2, 4, 8, 16]), Side.NORTH).changed)
        self.assertTrue(tilt_grid(column_board([2, 4, 8, 16]), Side.NORTH, count_stationary_slides=True).changed)

    def test_top_row_tile_never_changes(self):
        """A lone tile on the destination edge does not move, whatever the setting."""
        self.assertFalse(tilt_grid(column_board([0, 0, 0, 2]), Side.NORTH, count_stationary_slides=True).changed)

    def test_empty_board(self):
        result = tilt_grid(Grid(4), Side.EAST)
        self.assertFalse(result.changed)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.merges, ())


if __name__ == '__main__':
    main()
