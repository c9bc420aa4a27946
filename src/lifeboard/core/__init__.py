"""Core board engines and simulation logic."""

from .board import Board, Cell, OutOfBoundsError, next_state
from .dense_rescan import DenseRescanBoard
from .dense_cached import DenseCachedBoard
from .sparse_cached import SparseCachedBoard
from .config import SimulationConfig, create_board
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Board",
    "Cell",
    "OutOfBoundsError",
    "next_state",
    "DenseRescanBoard",
    "DenseCachedBoard",
    "SparseCachedBoard",
    "SimulationConfig",
    "create_board",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
