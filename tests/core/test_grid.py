"""Tests for the Grid class."""

import numpy as np
import pytest

from lifegrid.core.grid import Cell, Grid


def blinker_grid() -> Grid:
    """Horizontal blinker centered on a 5x5 grid."""
    return Grid.from_coordinates(5, 5, [(2, 1), (2, 2), (2, 3)])


def alive_cells(grid: Grid) -> set:
    rows, cols = np.nonzero(grid.cells)
    return {(int(r), int(c)) for r, c in zip(rows, cols)}


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (20, 10)
        assert grid.cells.shape == (20, 10)
        assert grid.population == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_initialization_rejects_bad_dimensions(self, width, height):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(width, height)

    def test_initialization_from_matrix(self):
        """Test building a grid from an initial matrix."""
        grid = Grid(3, 2, [[1, 0, 0], [0, 0, 1]])
        assert grid.get_cell(0, 0) is Cell.ALIVE
        assert grid.get_cell(1, 2) is Cell.ALIVE
        assert grid.get_cell(0, 1) is Cell.DEAD
        assert grid.population == 2

    def test_initialization_from_cell_values(self):
        """Test building a grid from Cell values."""
        grid = Grid(2, 2, [[Cell.ALIVE, Cell.DEAD], [Cell.DEAD, Cell.ALIVE]])
        assert grid.get_cell(0, 0).is_alive
        assert not grid.get_cell(0, 1).is_alive
        assert grid.population == 2

    def test_initialization_shape_mismatch(self):
        """Test that a matrix with the wrong shape is rejected."""
        with pytest.raises(ValueError):
            Grid(3, 2, [[1, 0], [0, 1]])

        # Transposed dimensions are still a mismatch
        with pytest.raises(ValueError):
            Grid(3, 2, np.zeros((3, 2)))

    def test_from_coordinates(self):
        """Test building a grid from alive coordinates."""
        grid = Grid.from_coordinates(4, 3, [(0, 3), (2, 0)])
        assert grid.get_cell(0, 3) is Cell.ALIVE
        assert grid.get_cell(2, 0) is Cell.ALIVE
        assert grid.population == 2

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (3, 0), (0, 4)])
    def test_from_coordinates_out_of_bounds(self, coord):
        """Test that off-grid coordinates fail construction."""
        with pytest.raises(IndexError):
            Grid.from_coordinates(4, 3, [(1, 1), coord])

    def test_from_provider(self):
        """Test building a grid from a pattern provider."""
        calls = []

        def provider(columns, rows):
            calls.append((columns, rows))
            cells = np.zeros((rows, columns), dtype=np.int8)
            cells[rows - 1, columns - 1] = 1
            return cells

        grid = Grid.from_provider(6, 4, provider)
        assert calls == [(6, 4)]
        assert grid.width == 6
        assert grid.height == 4
        assert grid.get_cell(3, 5) is Cell.ALIVE

    def test_get_cell_out_of_bounds(self):
        """Test that reads outside the grid raise IndexError."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.get_cell(-1, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, 3)

        with pytest.raises(IndexError):
            grid.get_cell(3, 0)

    def test_cells_are_read_only(self):
        """Test that the exposed matrix can't be written through."""
        grid = Grid(3, 3)

        with pytest.raises(ValueError):
            grid.cells[1, 1] = 1

        with pytest.raises(ValueError):
            grid.previous_cells[1, 1] = 1

        assert grid.population == 0

    def test_restore(self):
        """Test replacing the whole matrix with an earlier snapshot."""
        grid = Grid.from_coordinates(5, 5, [(2, 1), (2, 2), (2, 3)])
        saved = grid.snapshot()
        grid.step()

        grid.restore(saved)

        np.testing.assert_array_equal(grid.cells, saved)
        assert not grid.previous_cells.any()
        assert set(grid.get_changed_cells()) == {(2, 1), (2, 2), (2, 3)}

    def test_restore_shape_mismatch(self):
        """Test that restoring a matrix of the wrong shape fails."""
        grid = Grid.from_coordinates(5, 5, [(2, 2)])

        with pytest.raises(ValueError):
            grid.restore(np.zeros((4, 5)))

        assert grid.get_cell(2, 2) is Cell.ALIVE

    def test_snapshot_is_independent(self):
        """Test that a snapshot is not affected by later steps."""
        grid = blinker_grid()
        saved = grid.snapshot()
        expected = saved.copy()

        grid.step()
        grid.step()
        grid.step()

        np.testing.assert_array_equal(saved, expected)

    def test_count_live_neighbors(self):
        """Test neighbor counting for individual cells."""
        grid = Grid.from_coordinates(5, 5, [(1, 1), (2, 1), (1, 2)])

        assert grid.count_live_neighbors(0, 0) == 1
        assert grid.count_live_neighbors(2, 2) == 3
        assert grid.count_live_neighbors(1, 1) == 2  # The cell itself doesn't count
        assert grid.count_live_neighbors(3, 3) == 0

    def test_count_live_neighbors_full_grid(self):
        """Test the count range on a fully populated grid."""
        grid = Grid(3, 3, np.ones((3, 3)))

        assert grid.count_live_neighbors(1, 1) == 8
        assert grid.count_live_neighbors(0, 0) == 3  # Corner
        assert grid.count_live_neighbors(0, 1) == 5  # Edge
        assert grid.count_live_neighbors(2, 2) == 3

    def test_count_live_neighbors_does_not_wrap(self):
        """Test that opposite edges are not neighbors."""
        grid = Grid.from_coordinates(3, 3, [(2, 2), (2, 0), (0, 2)])

        assert grid.count_live_neighbors(0, 0) == 0

    def test_count_all_neighbors_matches_per_cell(self):
        """Test vectorized counts agree with per-cell counts."""
        rng = np.random.default_rng(1234)
        grid = Grid(9, 7, rng.random((7, 9)) < 0.4)

        counts = grid.count_all_neighbors()
        assert counts.shape == (7, 9)
        for row in range(7):
            for col in range(9):
                assert counts[row, col] == grid.count_live_neighbors(row, col)

    def test_underpopulation(self):
        """Test that an isolated cell dies."""
        grid = Grid.from_coordinates(5, 5, [(2, 2)])
        grid.step()
        assert grid.get_cell(2, 2) is Cell.DEAD
        assert grid.population == 0

    def test_overpopulation(self):
        """Test that a live cell with four neighbors dies."""
        grid = Grid.from_coordinates(5, 5, [(2, 2), (1, 1), (1, 3), (3, 1), (3, 3)])
        grid.step()
        assert grid.get_cell(2, 2) is Cell.DEAD

    def test_survival(self):
        """Test that live cells with two or three neighbors survive."""
        grid = Grid.from_coordinates(5, 5, [(1, 1), (2, 2), (3, 3)])
        grid.step()
        assert grid.get_cell(2, 2) is Cell.ALIVE

    def test_reproduction(self):
        """Test that a dead cell with exactly three neighbors is born."""
        grid = Grid.from_coordinates(5, 5, [(1, 1), (1, 3), (3, 2)])
        grid.step()
        assert grid.get_cell(2, 2) is Cell.ALIVE

    @pytest.mark.parametrize(
        "alive",
        [
            [(1, 1), (3, 3)],
            [(1, 1), (1, 3), (3, 1), (3, 3)],
        ],
    )
    def test_no_reproduction_with_two_or_four(self, alive):
        """Test that a dead cell with two or four neighbors stays dead."""
        grid = Grid.from_coordinates(5, 5, alive)
        grid.step()
        assert grid.get_cell(2, 2) is Cell.DEAD

    def test_corner_reproduction(self):
        """Test that the corner cell is born from three in-bounds neighbors."""
        grid = Grid.from_coordinates(4, 4, [(0, 1), (1, 0), (1, 1)])
        grid.step()
        assert grid.get_cell(0, 0) is Cell.ALIVE

    def test_edges_do_not_wrap_on_step(self):
        """Test that a bottom row doesn't spawn cells on the top row."""
        grid = Grid.from_coordinates(3, 3, [(2, 0), (2, 1), (2, 2)])
        grid.step()
        assert alive_cells(grid) == {(1, 1), (2, 1)}

    def test_block_still_life(self):
        """Test that a 2x2 block is unchanged by step."""
        grid = Grid.from_coordinates(6, 6, [(2, 2), (2, 3), (3, 2), (3, 3)])
        before = grid.snapshot()

        grid.step()

        np.testing.assert_array_equal(grid.cells, before)

    def test_blinker_oscillates(self):
        """Test that the blinker flips orientation and returns."""
        grid = blinker_grid()

        grid.step()
        assert alive_cells(grid) == {(1, 2), (2, 2), (3, 2)}

        grid.step()
        assert alive_cells(grid) == {(2, 1), (2, 2), (2, 3)}

    def test_step_is_deterministic(self):
        """Test that stepping the same snapshot twice gives the same result."""
        rng = np.random.default_rng(42)
        grid = Grid(12, 10, rng.random((10, 12)) < 0.35)
        saved = grid.snapshot()

        first = Grid(12, 10, saved)
        second = Grid(12, 10, saved)
        first.step()
        second.step()

        assert first == second

    def test_step_does_not_resize(self):
        """Test that stepping keeps dimensions."""
        grid = Grid(7, 4, np.ones((4, 7)))
        grid.step()
        assert grid.shape == (4, 7)

    def test_previous_cells(self):
        """Test that the previous generation stays readable after a step."""
        grid = blinker_grid()
        before = grid.snapshot()

        grid.step()

        np.testing.assert_array_equal(grid.previous_cells, before)

    def test_get_changed_cells(self):
        """Test change detection across a step."""
        grid = blinker_grid()
        grid.step()

        changed = set(grid.get_changed_cells())
        assert changed == {(1, 2), (3, 2), (2, 1), (2, 3)}

    def test_get_bounding_box(self):
        """Test bounding box of living cells."""
        assert Grid(4, 4).get_bounding_box() is None

        grid = Grid.from_coordinates(6, 5, [(1, 4), (3, 2)])
        assert grid.get_bounding_box() == (1, 2, 3, 4)

    def test_equality(self):
        """Test grid comparison."""
        a = Grid.from_coordinates(3, 3, [(1, 1)])
        b = Grid.from_coordinates(3, 3, [(1, 1)])
        c = Grid.from_coordinates(3, 3, [(0, 1)])

        assert a == b
        assert a != c
        assert a != Grid(4, 3)
        assert a != "not a grid"

    def test_str(self):
        """Test string representation."""
        grid = Grid(3, 2, [[1, 0, 0], [0, 0, 1]])
        assert str(grid) == "*..\n..*"
