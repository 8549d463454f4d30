"""Live neighbour counting with dead borders."""

from typing import Any

import numpy as np
import torch
import torch.nn.functional as F

from .cell import CellState

# Moore neighbourhood, centre excluded
_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def count_live_neighbours(grid: Any, row: int, col: int) -> int:
    """Count living neighbours of a single cell.

    Positions beyond the grid borders are treated as dead.

    Args:
        grid: 2D array-like of cell states, or rows of seed characters
        row: Row coordinate
        col: Column coordinate

    Returns:
        Number of living neighbours (0-8)

    Raises:
        ValueError: If a non-empty grid is not two-dimensional
    """
    cells = np.asarray(grid)
    if cells.dtype.kind in "US":
        # rows of seed characters
        cells = np.array([[CellState.from_char(ch) for ch in line] for line in grid], dtype=np.int8)
    if cells.size == 0:
        return 0
    if cells.ndim != 2:
        raise ValueError(f"Grid must be two-dimensional, got shape {cells.shape}")
    rows, cols = cells.shape

    count = 0
    for dr, dc in _OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols and cells[r, c]:
            count += 1

    return count


def count_all_neighbours(alive: np.ndarray) -> np.ndarray:
    """Count neighbours for every cell using a zero-padded convolution.

    Args:
        alive: 2D array of shape (rows, cols), non-zero for living cells

    Returns:
        int8 array of the same shape holding neighbour counts
    """
    if alive.size == 0:
        return np.zeros(alive.shape, dtype=np.int8)

    rows, cols = alive.shape
    torch_input = torch.from_numpy((alive > 0).astype(np.float32)).reshape(1, 1, rows, cols)

    # Zero padding makes off-grid positions count as dead
    neighbours = F.conv2d(torch_input, _KERNEL, padding=1)

    return neighbours[0, 0].round().numpy().astype(np.int8)
