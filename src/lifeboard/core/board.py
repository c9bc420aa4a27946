"""Shared board interface, cell type and the B3/S23 rule."""

from typing import Iterator, Optional, Protocol, Tuple, runtime_checkable

Cell = Tuple[int, int]

# Moore neighborhood, row by row, center excluded
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class OutOfBoundsError(IndexError):
    """Raised when a bounded board is addressed outside its grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} board")
        self.x = x
        self.y = y


def next_state(alive: bool, neighbor_count: int) -> bool:
    """Apply Conway's rules to a single cell.

    Args:
        alive: Whether the cell is currently alive
        neighbor_count: Number of living neighbors (0-8)

    Returns:
        True if the cell is alive in the next generation
    """
    if alive:
        return neighbor_count == 2 or neighbor_count == 3
    return neighbor_count == 3


@runtime_checkable
class Board(Protocol):
    """Operations every board variant provides.

    The variants do not share a base class; any object with these methods
    can be driven by GameOfLife and the frontends.
    """

    def get(self, x: int, y: int) -> bool:
        ...

    def set(self, x: int, y: int, alive: bool) -> None:
        ...

    def clear(self) -> None:
        ...

    def step(self) -> None:
        ...

    def neighbor_count(self, x: int, y: int) -> int:
        ...

    def iterate_live_cells(self) -> Iterator[Cell]:
        ...

    @property
    def population(self) -> int:
        ...

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        ...


def bounding_box(cells: Iterator[Cell]) -> Optional[Tuple[int, int, int, int]]:
    """Get the bounding box of a collection of cells.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y) or None if there are no cells
    """
    min_x = min_y = max_x = max_y = None
    for x, y in cells:
        if min_x is None:
            min_x = max_x = x
            min_y = max_y = y
            continue
        min_x = min(min_x, x)
        max_x = max(max_x, x)
        min_y = min(min_y, y)
        max_y = max(max_y, y)

    if min_x is None:
        return None
    return (min_x, min_y, max_x, max_y)
