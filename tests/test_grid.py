"""Tests for the read-only height grid and its neighbour queries."""
import numpy as np
import pytest

from basin_finder.errors import MalformedInputError
from basin_finder.grid import HeightGrid, idx_to_pos, neighbors_4, pos_to_idx


class TestIndexHelpers:
    def test_linear_offset_round_trip(self):
        W = 10
        for pos in [(0, 0), (9, 0), (0, 4), (6, 4)]:
            assert idx_to_pos(pos_to_idx(pos, W), W) == pos

    def test_offset_is_row_major(self):
        assert pos_to_idx((3, 2), 10) == 23

    def test_neighbors_4_interior(self):
        assert set(neighbors_4((1, 1), 3, 3)) == {(1, 0), (1, 2), (0, 1), (2, 1)}

    def test_neighbors_4_corner_omits_out_of_bounds(self):
        assert set(neighbors_4((0, 0), 3, 3)) == {(1, 0), (0, 1)}


class TestHeightGrid:
    def test_dimensions(self, canonical_grid):
        assert canonical_grid.width == 10
        assert canonical_grid.height == 5
        assert canonical_grid.size == 50

    def test_height_at_in_bounds(self, canonical_grid):
        assert canonical_grid.height_at((0, 0)) == 2
        assert canonical_grid.height_at((9, 0)) == 0
        assert canonical_grid.height_at((6, 4)) == 5

    def test_height_at_out_of_bounds_is_absent(self, canonical_grid):
        """Positions off the grid have no height rather than zero."""
        for pos in [(-1, 0), (0, -1), (10, 0), (0, 5), (100, 100)]:
            assert canonical_grid.height_at(pos) is None

    def test_heights_stay_in_digit_range(self, canonical_grid):
        for pos in canonical_grid.positions():
            assert 0 <= canonical_grid.height_at(pos) <= 9

    def test_neighbors_of_interior(self, canonical_grid):
        assert canonical_grid.neighbors_of((2, 2)) == {
            (2, 1): 8, (2, 3): 6, (1, 2): 8, (3, 2): 6,
        }

    def test_neighbors_of_corner_has_two(self, canonical_grid):
        assert canonical_grid.neighbors_of((9, 0)) == {(8, 0): 1, (9, 1): 1}

    def test_neighbors_of_single_cell_is_empty(self):
        grid = HeightGrid.from_rows([[5]])
        assert grid.neighbors_of((0, 0)) == {}

    def test_positions_visits_every_cell_once(self, canonical_grid):
        positions = list(canonical_grid.positions())
        assert len(positions) == 50
        assert len(set(positions)) == 50

    def test_cells_are_read_only(self, canonical_grid):
        with pytest.raises(ValueError):
            canonical_grid.as_array()[0, 0] = 7

    def test_source_array_is_copied(self):
        heights = np.array([[1, 2], [3, 4]])
        grid = HeightGrid(heights)
        heights[0, 0] = 9
        assert grid.height_at((0, 0)) == 1

    def test_str_reproduces_rows(self, canonical_grid, canonical_text):
        assert str(canonical_grid) == canonical_text.rstrip("\n")

    def test_equality_by_content(self):
        assert HeightGrid.from_rows([[1, 2]]) == HeightGrid.from_rows([[1, 2]])
        assert HeightGrid.from_rows([[1, 2]]) != HeightGrid.from_rows([[2, 1]])

    def test_empty_grid(self):
        grid = HeightGrid.from_rows([])
        assert (grid.width, grid.height) == (0, 0)
        assert list(grid.positions()) == []
        assert grid.height_at((0, 0)) is None

    def test_ragged_rows_rejected(self):
        with pytest.raises(MalformedInputError, match="line 2"):
            HeightGrid.from_rows([[1, 2, 3], [1, 2]])

    @pytest.mark.parametrize("bad", [10, -1])
    def test_heights_outside_digit_range_rejected(self, bad):
        with pytest.raises(MalformedInputError):
            HeightGrid(np.array([[1, bad]]))

    def test_non_2d_rejected(self):
        with pytest.raises(MalformedInputError):
            HeightGrid(np.array([1, 2, 3]))
