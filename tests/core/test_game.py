"""Tests for the GameOfLife class."""

import pytest

from lifeboard.core.config import create_board
from lifeboard.core.dense_cached import DenseCachedBoard
from lifeboard.core.game import GameOfLife
from lifeboard.core.sparse_cached import SparseCachedBoard


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        board = SparseCachedBoard()
        game = GameOfLife(board)

        assert game.board is board
        assert game.generation == 0
        assert game.population == 0

    @pytest.mark.parametrize("kind", ["sparse", "dense-cached", "dense-rescan"])
    def test_still_life_block(self, kind):
        """Test that a block pattern is stable (still life)."""
        board = create_board(kind, 10, 10) if kind != "sparse" else create_board(kind)
        game = GameOfLife(board)

        for x, y in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            board.set(x, y, True)

        for _ in range(5):
            game.step()

        assert game.population == 4
        assert set(board.iterate_live_cells()) == {(4, 4), (4, 5), (5, 4), (5, 5)}
        assert game.generation == 5

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        board = DenseCachedBoard(10, 10)
        game = GameOfLife(board)

        board.set(5, 4, True)
        board.set(5, 5, True)
        board.set(5, 6, True)

        game.step()
        assert game.population == 3
        assert board.get(4, 5) and board.get(5, 5) and board.get(6, 5)

        game.step()
        assert board.get(5, 4) and board.get(5, 5) and board.get(5, 6)

    def test_run(self):
        """Test running a fixed number of generations."""
        game = GameOfLife(SparseCachedBoard())
        game.board.set(0, 0, True)

        game.run(7)
        assert game.generation == 7
        assert game.population == 0

    def test_reset(self):
        """Test resetting the game."""
        board = SparseCachedBoard()
        game = GameOfLife(board)
        for x in range(3):
            board.set(x, 0, True)
        game.run(3)

        game.reset(clear_board=False)
        assert game.generation == 0
        assert game.population == 3

        game.reset()
        assert game.generation == 0
        assert game.population == 0

    def test_run_until_stable_extinction(self):
        """Test running until extinction."""
        board = SparseCachedBoard()
        game = GameOfLife(board)
        board.set(5, 5, True)

        final_gen, reason = game.run_until_stable(100)

        assert reason == "extinction"
        assert final_gen == 1

    def test_run_until_stable_empty_board(self):
        """Test an empty board stops immediately."""
        game = GameOfLife(SparseCachedBoard())
        assert game.run_until_stable(100) == (0, "extinction")

    def test_run_until_stable_still_life(self):
        """Test a pattern settling into a still life."""
        board = SparseCachedBoard()
        game = GameOfLife(board)
        # Three cells of a block grow into the full block
        for x, y in [(0, 0), (1, 0), (0, 1)]:
            board.set(x, y, True)

        final_gen, reason = game.run_until_stable(100)

        assert reason == "still_life"
        assert final_gen == 2
        assert game.population == 4

    def test_run_until_stable_max_generations(self):
        """Test an oscillator runs until the generation limit."""
        board = SparseCachedBoard()
        game = GameOfLife(board)
        for x in range(3):
            board.set(x, 0, True)

        final_gen, reason = game.run_until_stable(25)

        assert reason == "max_generations"
        assert final_gen == 25

    def test_get_statistics_bounded(self):
        """Test statistics for a dense board."""
        board = DenseCachedBoard(10, 10)
        game = GameOfLife(board)
        board.set(2, 3, True)
        board.set(4, 7, True)

        stats = game.get_statistics()

        assert stats["generation"] == 0
        assert stats["population"] == 2
        assert stats["grid_size"] == (10, 10)
        assert stats["population_density"] == pytest.approx(0.02)
        assert stats["bounding_box"] == (2, 3, 4, 7)
        assert stats["bounding_box_size"] == (3, 5)
        assert stats["bounding_box_area"] == 15

    def test_get_statistics_unbounded(self):
        """Test statistics for the sparse board."""
        game = GameOfLife(SparseCachedBoard())

        stats = game.get_statistics()

        assert "grid_size" not in stats
        assert "population_density" not in stats
        assert stats["bounding_box"] is None
        assert stats["bounding_box_size"] == (0, 0)
        assert stats["bounding_box_area"] == 0
