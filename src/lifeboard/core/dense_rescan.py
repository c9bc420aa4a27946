"""Bounded board that rescans every neighborhood on each step."""

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .board import Cell, NEIGHBOR_OFFSETS, OutOfBoundsError, bounding_box, next_state
from .neighbors import convolve_neighbors

logger = logging.getLogger(__name__)


class DenseRescanBoard:
    """Fixed-size grid storing one boolean per cell.

    No neighbor counts are cached: ``step`` recounts all eight neighbors of
    every cell against a snapshot of the previous generation. Edges are hard
    boundaries, cells outside the grid count as dead.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._cells = np.zeros(width * height, dtype=np.bool_)
        logger.debug("Created %dx%d rescanning board", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Get a (height, width) view of the cell store."""
        return self._cells.reshape(self._height, self._width)

    def check_point(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if not self.check_point(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return y * self._width + x

    def get(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Raises:
            OutOfBoundsError: If coordinates are outside the board
        """
        return bool(self._cells[self._index(x, y)])

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            OutOfBoundsError: If coordinates are outside the board
        """
        self._cells[self._index(x, y)] = alive

    def get_neighbors(self, x: int, y: int) -> List[Cell]:
        """Get the coordinates of the on-board neighbors of a cell.

        Corner and edge cells have fewer than eight neighbors.
        """
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.check_point(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell by scanning them."""
        return self._count_in(self._cells, x, y)

    def _count_in(self, cells: np.ndarray, x: int, y: int) -> int:
        count = 0
        for nx, ny in self.get_neighbors(x, y):
            if cells[ny * self._width + nx]:
                count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells at once.

        Returns:
            (height, width) array of neighbor counts
        """
        return convolve_neighbors(self.cells)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def randomize(self, seed: Optional[int] = None) -> None:
        """Make each cell independently alive with probability 1/2.

        Args:
            seed: Optional seed for a reproducible fill
        """
        rng = np.random.default_rng(seed)
        self._cells[:] = rng.random(self._cells.size) < 0.5

    def step(self) -> None:
        """Advance the board by one generation."""
        snapshot = self._cells.copy()

        for y in range(self._height):
            for x in range(self._width):
                index = y * self._width + x
                count = self._count_in(snapshot, x, y)
                self._cells[index] = next_state(bool(snapshot[index]), count)

    def iterate_live_cells(self) -> Iterator[Cell]:
        """Yield coordinates of living cells."""
        for index in np.flatnonzero(self._cells):
            y, x = divmod(int(index), self._width)
            yield (x, y)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        return bounding_box(self.iterate_live_cells())

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        grid = self.cells
        return "\n".join("".join("*" if alive else "." for alive in row) for row in grid)
