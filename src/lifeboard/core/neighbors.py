"""Neighbor counting from scratch, independent of any board's bookkeeping."""

from collections import Counter
from typing import Dict, Iterable

import numpy as np

from .board import Cell, NEIGHBOR_OFFSETS


def count_neighbors(live_cells: Iterable[Cell]) -> Dict[Cell, int]:
    """Count living neighbors of every cell adjacent to a live cell.

    Args:
        live_cells: Coordinates of living cells

    Returns:
        Mapping of cell to its nonzero live-neighbor count
    """
    counts: Counter = Counter()
    for x, y in live_cells:
        for dx, dy in NEIGHBOR_OFFSETS:
            counts[(x + dx, y + dy)] += 1
    return dict(counts)


def convolve_neighbors(cells: np.ndarray) -> np.ndarray:
    """Count neighbors for all cells of a bounded grid using convolution.

    Cells beyond the edge are treated as dead (zero padding). torch is
    imported on first use so that the boards and frontends load without it.

    Args:
        cells: 2D array indexed [y, x], nonzero where alive

    Returns:
        2D uint8 array of the same shape with neighbor counts
    """
    import torch
    import torch.nn.functional as F

    kernel = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

    height, width = cells.shape
    torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
    torch_input[0, 0] = torch.from_numpy((cells > 0).astype(np.float32))

    neighbors = F.conv2d(torch_input, kernel, padding=1)

    return neighbors[0, 0].numpy().astype(np.uint8)
