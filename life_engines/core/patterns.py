"""Classic Game of Life fixtures and pattern placement.

Patterns are small boolean arrays; ``place_pattern`` drops one into an
otherwise dead field. The grid has hard edges, so a pattern must fit.
"""

import numpy as np

from .grid import validate_dimensions


def blinker() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def block() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def glider() -> np.ndarray:
    """Create classic glider, travelling down and to the right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def ring() -> np.ndarray:
    """Create the 4x5 ring used in the predefined demo field."""
    return np.array([
        [False, True, True, True, False],
        [True, False, False, False, True],
        [True, False, False, False, True],
        [False, True, True, True, False]
    ], dtype=bool)


def place_pattern(pattern: np.ndarray, rows: int, cols: int,
                  row: int, col: int) -> np.ndarray:
    """Place a pattern into a new dead grid.

    Args:
        pattern: 2D boolean array representing the pattern
        rows: Height of the new grid
        cols: Width of the new grid
        row: Top row of the pattern in the grid
        col: Left column of the pattern in the grid

    Returns:
        New (rows, cols) grid containing the pattern

    Raises:
        ValueError: If the pattern does not fit inside the grid
    """
    validate_dimensions(rows, cols)
    pattern = np.asarray(pattern, dtype=bool)
    height, width = pattern.shape

    if row < 0 or col < 0 or row + height > rows or col + width > cols:
        raise ValueError(f"Pattern {height}x{width} at ({row}, {col}) "
                         f"does not fit in {rows}x{cols} grid")

    grid = np.zeros((rows, cols), dtype=bool)
    grid[row:row + height, col:col + width] = pattern
    return grid


def predefined_grid() -> np.ndarray:
    """The default 18x11 demo field: two rings stacked vertically."""
    grid = np.zeros((18, 11), dtype=bool)
    grid[3:7, 3:8] = ring()
    grid[11:15, 3:8] = ring()
    return grid
