"""
Conway's Game of Life Neighbor Rule

The birth/survival rule and the compiled row kernel shared by both engines.
Cells outside the grid are absent from the neighbor count: there is no
wraparound.

The kernels are compiled with numba in nopython mode and release the GIL,
so worker threads in the parallel engine genuinely run side by side.
"""

from typing import Dict, FrozenSet, Tuple

import numpy as np
from numba import jit


# Standard Conway rules
SURVIVAL_COUNTS: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_COUNTS: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors


@jit(nopython=True, nogil=True, cache=True)
def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors == 2 or live_neighbors == 3
    return live_neighbors == 3


@jit(nopython=True, nogil=True, cache=True)
def count_live_neighbors(grid: np.ndarray, row: int, col: int) -> int:
    """Count live neighbors of cell (row, col) using the Moore neighborhood.

    Args:
        grid: 2D boolean numpy array
        row: Cell row index
        col: Cell column index

    Returns:
        Number of live neighbors (0-8)
    """
    rows, cols = grid.shape
    row_start = max(row - 1, 0)
    row_end = min(row + 1, rows - 1)
    col_start = max(col - 1, 0)
    col_end = min(col + 1, cols - 1)

    count = 0
    for i in range(row_start, row_end + 1):
        for j in range(col_start, col_end + 1):
            if grid[i, j] and not (i == row and j == col):
                count += 1

    return count


@jit(nopython=True, nogil=True, cache=True)
def advance_rows(prev: np.ndarray, out: np.ndarray, row_start: int) -> None:
    """Write the next state of a block of rows into ``out``.

    ``out`` holds rows ``row_start`` to ``row_start + out.shape[0]`` of the
    next generation. Only ``prev`` is read, and only ``out`` is written.

    Args:
        prev: Complete grid for the current generation
        out: Row slice of the next-generation grid
        row_start: Index in ``prev`` of the first row held by ``out``
    """
    cols = prev.shape[1]
    for offset in range(out.shape[0]):
        row = row_start + offset
        for col in range(cols):
            neighbors = count_live_neighbors(prev, row, col)
            out[offset, col] = update_cell(prev[row, col], neighbors)


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    rules = {}

    for alive in [False, True]:
        for neighbors in range(9):
            rules[(alive, neighbors)] = bool(update_cell(alive, neighbors))

    return rules
