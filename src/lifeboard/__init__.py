"""Conway's Game of Life with dense and sparse board engines."""

__version__ = "0.1.0"

from .core.board import Board, OutOfBoundsError
from .core.dense_rescan import DenseRescanBoard
from .core.dense_cached import DenseCachedBoard
from .core.sparse_cached import SparseCachedBoard
from .core.config import SimulationConfig, create_board
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Board",
    "OutOfBoundsError",
    "DenseRescanBoard",
    "DenseCachedBoard",
    "SparseCachedBoard",
    "SimulationConfig",
    "create_board",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
