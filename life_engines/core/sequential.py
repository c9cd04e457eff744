"""Single-threaded reference engine for Conway's Game of Life."""

import numpy as np

from .conway_rules import advance_rows
from .engine import LifeEngine


class SequentialEngine(LifeEngine):
    """Computes each generation cell by cell in a single pass.

    Implements the classic rules on a bounded grid:
    - Live cell survives with 2-3 neighbors
    - Dead cell becomes alive with exactly 3 neighbors
    - All other cells die/stay dead
    """

    def _next_generation(self, grid: np.ndarray) -> np.ndarray:
        new_grid = np.empty_like(grid)
        advance_rows(grid, new_grid, 0)
        return new_grid
