"""Grid construction and validation for the Game of Life engines.

A grid is a C-contiguous numpy boolean array of shape (rows, cols), where
True means alive. Engines never hand out writable references to their own
grids: engine-owned arrays are locked read-only, callers receive views of
them, and grids coming in from callers are always deep-copied.
"""

import numbers
from typing import Optional, Union

import numpy as np

from ..exceptions import InvalidDimensionError, NullGridError

RandomSource = Union[None, int, np.random.Generator]


def validate_dimensions(rows: int, cols: int) -> None:
    """Check that grid dimensions are positive integers.

    Raises:
        InvalidDimensionError: If either dimension is not a positive integer
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensionError(f"{name} must be positive, got {value}")


def validate_density(density: float) -> None:
    """Check that an alive-cell probability lies in [0, 1]."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be between 0 and 1, got {density}")


def random_grid(rows: int, cols: int, rng: RandomSource = None,
                density: float = 0.5) -> np.ndarray:
    """Create a grid where every cell is alive with independent probability.

    Args:
        rows: Number of rows
        cols: Number of columns
        rng: numpy Generator, integer seed, or None for fresh entropy
        density: Probability of a cell being alive (0.0 to 1.0)

    Returns:
        New boolean grid of shape (rows, cols)

    Raises:
        InvalidDimensionError: If dimensions are invalid
        ValueError: If density is outside [0, 1]
    """
    validate_dimensions(rows, cols)
    validate_density(density)

    generator = np.random.default_rng(rng)
    return generator.random((rows, cols)) < density


def copy_grid(grid) -> np.ndarray:
    """Deep-copy a caller-supplied grid into an owned boolean array.

    Accepts numpy arrays or nested sequences of truthy values.

    Raises:
        NullGridError: If grid is None or holds no cells
        InvalidDimensionError: If grid is not two-dimensional or is ragged
    """
    if grid is None:
        raise NullGridError("Initial grid must not be None")

    try:
        state = np.array(grid, dtype=bool, order="C", copy=True)
    except ValueError as e:
        raise InvalidDimensionError(f"Initial grid must be rectangular: {e}") from e

    if state.ndim != 2:
        if state.size == 0:
            raise NullGridError("Initial grid must contain at least one cell")
        raise InvalidDimensionError(f"Initial grid must be 2-D, got shape {state.shape}")
    if state.size == 0:
        raise NullGridError(f"Initial grid must contain at least one cell, got shape {state.shape}")

    return state


def lock_grid(grid: np.ndarray) -> np.ndarray:
    """Mark an owned grid read-only in place and return it.

    Views taken from a locked grid cannot be made writable again.
    """
    grid.flags.writeable = False
    return grid


def read_only_view(grid: np.ndarray) -> np.ndarray:
    """Return a view of ``grid`` that cannot be written through."""
    view = grid.view()
    view.flags.writeable = False
    return view


def count_alive(grid: np.ndarray) -> int:
    """Count total number of alive cells."""
    return int(np.count_nonzero(grid))


def grids_equal(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> bool:
    """Cell-by-cell equality of two grids with identical shapes."""
    if a is None or b is None:
        return False
    return a.shape == b.shape and bool(np.array_equal(a, b))
