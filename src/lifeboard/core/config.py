"""Simulation configuration and board construction."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .board import Board
from .dense_cached import DenseCachedBoard
from .dense_rescan import DenseRescanBoard
from .sparse_cached import SparseCachedBoard

BOARD_KINDS: Dict[str, Callable[..., Board]] = {
    "sparse": SparseCachedBoard,
    "dense-cached": DenseCachedBoard,
    "dense-rescan": DenseRescanBoard,
}

BOUNDED_KINDS = ("dense-cached", "dense-rescan")


def create_board(kind: str, width: Optional[int] = None, height: Optional[int] = None) -> Board:
    """Create an empty board of the given kind.

    Args:
        kind: One of "sparse", "dense-cached" or "dense-rescan"
        width: Number of columns (bounded kinds only)
        height: Number of rows (bounded kinds only)

    Returns:
        New empty board

    Raises:
        ValueError: If the kind is unknown or a bounded kind lacks dimensions
    """
    if kind not in BOARD_KINDS:
        raise ValueError(f"Unknown board kind '{kind}'. Available: {', '.join(BOARD_KINDS)}")

    if kind in BOUNDED_KINDS:
        if width is None or height is None:
            raise ValueError(f"Board kind '{kind}' requires width and height")
        return BOARD_KINDS[kind](width, height)

    return BOARD_KINDS[kind]()


def is_bounded(board: Board) -> bool:
    """Check whether a board has fixed dimensions.

    Bounded boards expose ``shape`` as ``(width, height)``; unbounded boards
    do not.
    """
    return hasattr(board, "shape")


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    board: str = "sparse"
    width: int = 50
    height: int = 50
    max_generations: int = 1000
    pattern: Optional[str] = None
    pattern_x: int = 0
    pattern_y: int = 0
    randomize: bool = False
    seed: Optional[int] = None

    def create_board(self) -> Board:
        """Create an empty board described by this configuration."""
        if self.board in BOUNDED_KINDS:
            return create_board(self.board, self.width, self.height)
        return create_board(self.board)
