"""Tests for the placement grid."""

import numpy as np
import pytest
from py_mosaic.core.grid import EMPTY, Filled, PlacementGrid, PlacementRecord


class TestPlacementGrid:
    """Test cell state and placement records."""

    @pytest.fixture
    def grid(self):
        return PlacementGrid(5)

    def test_starts_empty(self, grid):
        assert len(grid) == 0
        assert not np.any(grid.filled)
        assert grid.cell((2, 3)) == EMPTY
        assert grid.is_empty((0, 0))

    def test_fill(self, grid):
        record = grid.fill((1, 4), (10, 20, 30))
        assert record == PlacementRecord((10, 20, 30), (1, 4))
        assert grid.records == [record]
        assert grid.cell((1, 4)) == Filled((10, 20, 30))
        assert not grid.is_empty((1, 4))
        np.testing.assert_array_equal(grid.colors[1, 4], [10, 20, 30])

    def test_fill_is_monotonic(self, grid):
        """A filled cell cannot be recolored."""
        grid.fill((0, 0), (1, 2, 3))
        with pytest.raises(ValueError):
            grid.fill((0, 0), (4, 5, 6))
        assert grid.cell((0, 0)) == Filled((1, 2, 3))
        assert len(grid) == 1

    def test_records_keep_placement_order(self, grid):
        locations = [(4, 4), (0, 1), (2, 2)]
        for i, location in enumerate(locations):
            grid.fill(location, (i, i, i))
        assert [r.location for r in grid.records] == locations

    def test_wrap(self, grid):
        """Test that wraparound maps any coordinate into the grid."""
        assert grid.wrap(0, 4) == (0, 4)
        assert grid.wrap(5, 6) == (0, 1)
        assert grid.wrap(-1, -6) == (4, 4)
        assert grid.wrap(-10, 12) == (0, 2)
        for x in range(-12, 13):
            wx, wy = grid.wrap(x, -x)
            assert 0 <= wx < 5
            assert 0 <= wy < 5

    def test_percent_filled(self, grid):
        assert grid.percent_filled() == 0
        grid.fill((0, 0), (0, 0, 0))
        assert grid.percent_filled() == 4
        for location in [(1, 0), (1, 1), (1, 2), (1, 3), (1, 4), (2, 0)]:
            grid.fill(location, (0, 0, 0))
        assert grid.percent_filled() == 28

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            PlacementGrid(0)
