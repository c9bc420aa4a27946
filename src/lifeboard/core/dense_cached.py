"""Bounded board with incrementally maintained neighbor counts."""

import logging
from typing import Iterator, Optional, Tuple

import numpy as np

from .board import Cell, NEIGHBOR_OFFSETS, OutOfBoundsError, bounding_box, next_state

logger = logging.getLogger(__name__)

CELL_DTYPE = np.dtype([("alive", np.bool_), ("neighbor_count", np.uint8)])


class DenseCachedBoard:
    """Fixed-size grid where every cell carries its own live-neighbor count.

    Counts are kept up to date by ``set``: flipping a cell adds or removes
    one from each of its on-board neighbors. ``step`` then reads the counts
    straight from a snapshot instead of scanning neighborhoods.
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
        self._cells = np.zeros(width * height, dtype=CELL_DTYPE)
        logger.debug("Created %dx%d cached board", width, height)

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
        """Get a (height, width) view of the alive flags."""
        return self._cells["alive"].reshape(self._height, self._width)

    @property
    def neighbor_counts(self) -> np.ndarray:
        """Get a (height, width) view of the stored neighbor counts."""
        return self._cells["neighbor_count"].reshape(self._height, self._width)

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
        return bool(self._cells["alive"][self._index(x, y)])

    def neighbor_count(self, x: int, y: int) -> int:
        """Get the stored live-neighbor count of a cell."""
        return int(self._cells["neighbor_count"][self._index(x, y)])

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell, updating its neighbors' counts.

        Writing the value a cell already has does nothing.

        Raises:
            OutOfBoundsError: If coordinates are outside the board
        """
        index = self._index(x, y)
        alive = bool(alive)
        if bool(self._cells["alive"][index]) == alive:
            return

        self._cells["alive"][index] = alive
        self._update_neighbors(x, y, 1 if alive else -1)

    def _update_neighbors(self, x: int, y: int, delta: int) -> None:
        counts = self._cells["neighbor_count"]
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not self.check_point(nx, ny):
                continue
            index = ny * self._width + nx
            count = int(counts[index]) + delta
            assert 0 <= count <= 8, f"neighbor count of ({nx}, {ny}) out of range: {count}"
            counts[index] = count

    def clear(self) -> None:
        """Clear all cells and their neighbor counts."""
        self._cells["alive"] = False
        self._cells["neighbor_count"] = 0

    def randomize(self, seed: Optional[int] = None) -> None:
        """Make each cell independently alive with probability 1/2.

        Every cell is written through ``set`` so counts stay consistent.

        Args:
            seed: Optional seed for a reproducible fill
        """
        rng = np.random.default_rng(seed)
        values = rng.random(self._cells.size) < 0.5
        for index, alive in enumerate(values):
            y, x = divmod(index, self._width)
            self.set(x, y, bool(alive))

    def step(self) -> None:
        """Advance the board by one generation."""
        snapshot = self._cells.copy()

        for index, (alive, count) in enumerate(snapshot.tolist()):
            y, x = divmod(index, self._width)
            self.set(x, y, next_state(alive, count))

    def iterate_live_cells(self) -> Iterator[Cell]:
        """Yield coordinates of living cells."""
        for index in np.flatnonzero(self._cells["alive"]):
            y, x = divmod(int(index), self._width)
            yield (x, y)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells["alive"]))

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
