"""Unbounded board tracking only live cells and their neighborhoods."""

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .board import Cell, NEIGHBOR_OFFSETS, bounding_box

logger = logging.getLogger(__name__)

# Largest bounding-box side rendered by __str__
MAX_RENDER_SIZE = 1000


class SparseCachedBoard:
    """Infinite plane stored as a set of live cells plus neighbor counts.

    Every integer coordinate is valid. The count mapping holds an entry for
    a cell only while at least one of its neighbors is alive, so memory is
    proportional to the live population and its perimeter. Stepping costs
    the same, independent of where the cells are.
    """

    def __init__(self) -> None:
        """Initialize an empty board."""
        self._alive: Set[Cell] = set()
        self._neighbors: Dict[Cell, int] = {}
        logger.debug("Created sparse board")

    def get(self, x: int, y: int) -> bool:
        """Get the state of a cell."""
        return (x, y) in self._alive

    def neighbor_count(self, x: int, y: int) -> int:
        """Get the live-neighbor count of a cell (0 if untracked)."""
        return self._neighbors.get((x, y), 0)

    def neighbor_counts(self) -> Dict[Cell, int]:
        """Get a copy of all nonzero neighbor counts."""
        return dict(self._neighbors)

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell, updating its neighbors' counts.

        Writing the value a cell already has does nothing.
        """
        cell = (x, y)
        if alive:
            if cell in self._alive:
                return
            self._alive.add(cell)
            delta = 1
        else:
            if cell not in self._alive:
                return
            self._alive.remove(cell)
            delta = -1

        neighbors = self._neighbors
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = (x + dx, y + dy)
            count = neighbors.get(neighbor, 0) + delta
            assert count >= 0, f"neighbor count of {neighbor} went negative"
            if count:
                neighbors[neighbor] = count
            else:
                del neighbors[neighbor]

    def clear(self) -> None:
        """Clear all cells."""
        self._alive.clear()
        self._neighbors.clear()

    def step(self) -> None:
        """Advance the board by one generation."""
        # Both lists are fixed before the first write
        kill: List[Cell] = [
            cell for cell in self._alive if not 2 <= self._neighbors.get(cell, 0) <= 3
        ]
        spawn: List[Cell] = [
            cell
            for cell, count in self._neighbors.items()
            if count == 3 and cell not in self._alive
        ]

        for x, y in kill:
            self.set(x, y, False)
        for x, y in spawn:
            self.set(x, y, True)

    def iterate_live_cells(self) -> Iterator[Cell]:
        """Yield coordinates of living cells in no particular order.

        The board must not be modified while the iterator is in use.
        """
        yield from self._alive

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return len(self._alive)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        return bounding_box(iter(self._alive))

    def __str__(self) -> str:
        """Render the bounding box of living cells as '*' and '.'.

        Boxes wider or taller than MAX_RENDER_SIZE render as a one-line
        summary instead of the full grid.
        """
        bbox = self.get_bounding_box()
        if bbox is None:
            return ""

        min_x, min_y, max_x, max_y = bbox
        width = max_x - min_x + 1
        height = max_y - min_y + 1
        if width > MAX_RENDER_SIZE or height > MAX_RENDER_SIZE:
            return f"Grid too large to display ({width}x{height}, {len(self._alive)} live cells)"

        rows = []
        for y in range(min_y, max_y + 1):
            rows.append(
                "".join("*" if (x, y) in self._alive else "." for x in range(min_x, max_x + 1))
            )
        return "\n".join(rows)
