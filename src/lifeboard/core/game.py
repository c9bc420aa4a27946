"""Conway's Game of Life simulation driver."""

import logging
from typing import Any, Dict, Tuple

from .board import Board
from .config import is_bounded

logger = logging.getLogger(__name__)


class GameOfLife:
    """Drives a board one generation at a time.

    Implements the classic rules through the board's own ``step``:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: The board to simulate
        """
        self.board = board
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.board.step()
        self._generation += 1

    def run(self, generations: int) -> None:
        """Advance the simulation by a number of generations."""
        for _ in range(generations):
            self.step()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out or stops changing.

        Only the previous generation is compared, so oscillators and
        spaceships run until max_generations.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'still_life', 'max_generations'
        """
        reason = "max_generations"
        for _ in range(max_generations):
            if self.population == 0:
                reason = "extinction"
                break

            before = set(self.board.iterate_live_cells())
            self.step()

            if self.population == 0:
                reason = "extinction"
                break
            if set(self.board.iterate_live_cells()) == before:
                reason = "still_life"
                break

        logger.debug("Stopped at generation %d: %s", self._generation, reason)
        return self._generation, reason

    def reset(self, clear_board: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_board: Whether to clear the board as well
        """
        if clear_board:
            self.board.clear()
        self._generation = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the current generation.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.board.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
        }

        if is_bounded(self.board):
            width, height = self.board.shape
            stats["grid_size"] = (width, height)
            stats["population_density"] = self.population / (width * height)

        if bbox:
            stats["bounding_box"] = bbox
            box_width = bbox[2] - bbox[0] + 1
            box_height = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_width, box_height)
            stats["bounding_box_area"] = box_width * box_height
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
