"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.grid import Grid
from lifegrid.core.errors import InvalidConfiguration


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.cells.shape == (20, 10)
        assert grid.population == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, width, height):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(InvalidConfiguration):
            Grid(width, height)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 4)

        assert grid.get_cell(0, 0) is False

        grid.set_cell(4, 1, True)
        assert grid.get_cell(4, 1) is True
        # Row-major storage: row 1, column 4
        assert grid.cells[1, 4]

        grid.set_cell(4, 1, False)
        assert grid.get_cell(4, 1) is False

    def test_out_of_bounds(self):
        """Test that the grid never wraps coordinates itself."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, True)

        with pytest.raises(IndexError):
            grid.set_cell(3, 0, True)

        with pytest.raises(IndexError):
            grid.get_cell(0, 3)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.population == 2

        grid.clear()
        assert grid.population == 0

    def test_copy_is_independent(self):
        """Test that copies do not share cell storage."""
        grid = Grid(4, 4)
        grid.set_cell(1, 2, True)

        other = grid.copy()
        assert other == grid

        other.set_cell(0, 0, True)
        assert grid.get_cell(0, 0) is False
        assert other != grid

    def test_to_list_row_major(self):
        """Test nested list conversion is one list per row."""
        grid = Grid(3, 2)
        grid.set_cell(2, 0, True)

        assert grid.to_list() == [[False, False, True], [False, False, False]]

    def test_equality(self):
        """Test grid equality comparison."""
        assert Grid(3, 3) == Grid(3, 3)
        assert Grid(3, 3) != Grid(3, 4)
        assert Grid(3, 3) != "not a grid"

    def test_string_representation(self):
        """Test string output."""
        grid = Grid(3, 2)
        grid.set_cell(0, 0, True)
        grid.set_cell(2, 1, True)

        assert str(grid) == "*..\n..*"

    def test_cells_dtype(self):
        """Test cells are stored as booleans."""
        assert Grid(2, 2).cells.dtype == np.bool_
