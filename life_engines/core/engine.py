"""Shared state handling for Game of Life engines.

An engine owns an immutable snapshot of its initial grid, the current grid
and a generation counter. Subclasses only decide how the next generation is
computed; publication, counting and restarts are handled here so every
engine behaves identically from the outside.

Engines are single-writer: calling ``step`` or ``restart`` on one instance
from two threads at once is not supported.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from .grid import RandomSource, copy_grid, lock_grid, random_grid, read_only_view

logger = logging.getLogger(__name__)


class LifeEngine(ABC):
    """Base class for Conway's Game of Life engines.

    Only subclasses that implement ``_next_generation`` can be built.

    Attributes:
        rows: Grid height in cells
        cols: Grid width in cells
    """

    def __init__(self, rows: int, cols: int, rng: RandomSource = None,
                 density: float = 0.5):
        """Initialize engine with a randomly seeded grid.

        Args:
            rows: Number of grid rows
            cols: Number of grid columns
            rng: numpy Generator or integer seed for reproducible grids
            density: Probability of each cell starting alive

        Raises:
            InvalidDimensionError: If rows or cols are not positive integers
            ValueError: If density is outside [0, 1]
        """
        self._set_initial(random_grid(rows, cols, rng, density))

    @classmethod
    def from_grid(cls, grid, **kwargs) -> 'LifeEngine':
        """Create engine from an explicit initial grid.

        The grid is deep-copied; later changes to the caller's array do not
        reach the engine.

        Args:
            grid: 2D boolean array or nested sequence
            **kwargs: Extra constructor options for the engine subclass

        Raises:
            NullGridError: If grid is None or empty
            InvalidDimensionError: If grid is not 2-D
        """
        state = copy_grid(grid)
        engine = cls.__new__(cls)
        engine._configure(**kwargs)
        engine._set_initial(state)
        return engine

    def _configure(self, **kwargs) -> None:
        """Apply subclass options when constructing through ``from_grid``."""
        if kwargs:
            raise TypeError(f"Unexpected options: {sorted(kwargs)}")

    def _set_initial(self, state: np.ndarray) -> None:
        self._initial = lock_grid(state)
        self._grid = lock_grid(state.copy())
        self._generation = 0
        logger.debug(f"Created {type(self).__name__} {self.rows}x{self.cols}")

    @property
    def rows(self) -> int:
        return self._initial.shape[0]

    @property
    def cols(self) -> int:
        return self._initial.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._initial.shape

    @property
    def generation(self) -> int:
        """Number of steps taken since construction or the last restart."""
        return self._generation

    @property
    def current_grid(self) -> np.ndarray:
        """Read-only view of the current generation, row-major."""
        return read_only_view(self._grid)

    @property
    def initial_grid(self) -> np.ndarray:
        """Read-only view of the grid the engine started from."""
        return read_only_view(self._initial)

    def step(self) -> int:
        """Advance the grid by one generation.

        Returns:
            The new generation number
        """
        new_grid = self._next_generation(self._grid)
        self._grid = lock_grid(new_grid)
        self._generation += 1
        return self._generation

    @abstractmethod
    def _next_generation(self, grid: np.ndarray) -> np.ndarray:
        """Compute a freshly allocated next-generation grid from ``grid``."""

    def restart(self) -> None:
        """Reset the current grid to the initial grid and the counter to 0."""
        self._grid = lock_grid(self._initial.copy())
        self._generation = 0
        logger.debug(f"Restarted {type(self).__name__}")

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.rows}x{self.cols}, "
                f"generation={self._generation})")
