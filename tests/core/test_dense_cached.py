"""Tests for the DenseCachedBoard class."""

import random

import numpy as np
import pytest

from lifeboard.core.board import OutOfBoundsError
from lifeboard.core.dense_cached import DenseCachedBoard
from lifeboard.core.neighbors import convolve_neighbors


def assert_counts_consistent(board):
    """Stored counts must match a fresh count of the live cells."""
    expected = convolve_neighbors(board.cells)
    assert np.array_equal(board.neighbor_counts, expected)


class TestDenseCachedBoard:
    """Test cases for the DenseCachedBoard class."""

    def test_initialization(self):
        """Test board initialization."""
        board = DenseCachedBoard(7, 4)
        assert board.width == 7
        assert board.height == 4
        assert board.shape == (7, 4)
        assert board.population == 0
        assert not board.neighbor_counts.any()

    def test_invalid_dimensions(self):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            DenseCachedBoard(-3, 3)

    def test_out_of_bounds(self):
        """Test that out-of-range access fails without touching state."""
        board = DenseCachedBoard(3, 3)

        with pytest.raises(OutOfBoundsError):
            board.set(3, 3, True)
        with pytest.raises(OutOfBoundsError):
            board.get(-1, 1)
        with pytest.raises(OutOfBoundsError):
            board.neighbor_count(0, 5)

        assert board.population == 0
        assert not board.neighbor_counts.any()

    def test_single_cell_counts(self):
        """Test a lone cell increments exactly its eight neighbors."""
        board = DenseCachedBoard(3, 3)
        board.set(1, 1, True)

        for y in range(3):
            for x in range(3):
                expected = 0 if (x, y) == (1, 1) else 1
                assert board.neighbor_count(x, y) == expected

        board.step()
        assert board.population == 0
        assert not board.neighbor_counts.any()

    def test_corner_cell_counts(self):
        """Test a corner cell only touches its on-board neighbors."""
        board = DenseCachedBoard(4, 4)
        board.set(0, 0, True)

        assert board.neighbor_count(1, 0) == 1
        assert board.neighbor_count(0, 1) == 1
        assert board.neighbor_count(1, 1) == 1
        assert int(board.neighbor_counts.sum()) == 3

    def test_set_is_idempotent(self):
        """Test writing the current value leaves counts unchanged."""
        board = DenseCachedBoard(5, 5)
        board.set(2, 2, True)
        counts = board.neighbor_counts.copy()

        board.set(2, 2, True)
        assert np.array_equal(board.neighbor_counts, counts)

        board.set(0, 0, False)
        assert np.array_equal(board.neighbor_counts, counts)

    def test_set_then_unset_restores_state(self):
        """Test toggling a cell on and off restores the exact prior state."""
        board = DenseCachedBoard(6, 6)
        board.randomize(seed=11)
        cells = board.cells.copy()
        counts = board.neighbor_counts.copy()

        for x, y in [(0, 0), (3, 3), (5, 2)]:
            if board.get(x, y):
                continue
            board.set(x, y, True)
            board.set(x, y, False)

        assert np.array_equal(board.cells, cells)
        assert np.array_equal(board.neighbor_counts, counts)

    def test_counts_consistent_after_random_sets(self):
        """Test counts stay consistent through arbitrary writes."""
        board = DenseCachedBoard(8, 6)
        rng = random.Random(5)

        for _ in range(300):
            board.set(rng.randrange(8), rng.randrange(6), rng.random() < 0.6)
            assert_counts_consistent(board)

    def test_counts_consistent_after_steps(self):
        """Test counts stay consistent across generations."""
        board = DenseCachedBoard(12, 12)
        board.randomize(seed=8)
        assert_counts_consistent(board)

        for _ in range(15):
            board.step()
            assert_counts_consistent(board)

    def test_blinker(self):
        """Test the blinker oscillates between vertical and horizontal."""
        board = DenseCachedBoard(5, 5)
        for y in (1, 2, 3):
            board.set(2, y, True)

        board.step()
        assert sorted(board.iterate_live_cells()) == [(1, 2), (2, 2), (3, 2)]
        assert board.neighbor_count(2, 1) == 3

        board.step()
        assert sorted(board.iterate_live_cells()) == [(2, 1), (2, 2), (2, 3)]

    def test_clear(self):
        """Test clearing resets cells and counts."""
        board = DenseCachedBoard(5, 5)
        board.randomize(seed=1)

        board.clear()
        assert board.population == 0
        assert not board.neighbor_counts.any()

        board.set(2, 2, True)
        assert_counts_consistent(board)

    def test_randomize(self):
        """Test random fill is reproducible and keeps counts consistent."""
        board = DenseCachedBoard(20, 20)
        board.randomize(seed=42)
        first = board.cells.copy()

        assert 120 <= board.population <= 280
        assert_counts_consistent(board)

        board.randomize(seed=42)
        assert np.array_equal(board.cells, first)
        assert_counts_consistent(board)

    def test_underflow_is_an_assertion(self):
        """Test a corrupted count trips the invariant check."""
        board = DenseCachedBoard(3, 3)
        board.set(1, 1, True)
        board._cells["neighbor_count"][0] = 0

        with pytest.raises(AssertionError):
            board.set(1, 1, False)

    def test_string_representation(self):
        """Test string representation."""
        board = DenseCachedBoard(3, 3)
        board.set(0, 0, True)
        board.set(1, 1, True)
        board.set(2, 2, True)
        assert str(board) == "*..\n.*.\n..*"
