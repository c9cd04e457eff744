"""Data-parallel engine for Conway's Game of Life.

Rows are split into contiguous chunks which run on a thread pool. Every task
reads the shared previous grid and writes only its own row slice of the new
grid, so no locks are needed; the step returns once all chunks are done.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from .conway_rules import advance_rows
from .engine import LifeEngine
from .grid import RandomSource
from .partition import (
    DEFAULT_CHUNKS_PER_WORKER,
    MIN_CHUNK_SIZE,
    available_parallelism,
    compute_chunk_size,
    parallel_for,
    partition_range,
)

logger = logging.getLogger(__name__)


class ParallelEngine(LifeEngine):
    """Game of Life engine computing row chunks on a bounded thread pool.

    Produces bit-identical grids to ``SequentialEngine`` for the same initial
    grid and generation count. Call ``close`` (or use the engine as a context
    manager) to release the worker threads.
    """

    def __init__(self, rows: int, cols: int, rng: RandomSource = None,
                 density: float = 0.5, max_workers: Optional[int] = None,
                 chunk_size: Optional[int] = None,
                 chunks_per_worker: int = DEFAULT_CHUNKS_PER_WORKER,
                 min_chunk_size: int = MIN_CHUNK_SIZE):
        """Initialize engine with a randomly seeded grid.

        Args:
            rows: Number of grid rows
            cols: Number of grid columns
            rng: numpy Generator or integer seed for reproducible grids
            density: Probability of each cell starting alive
            max_workers: Worker threads (defaults to the CPU count)
            chunk_size: Fixed rows per chunk (defaults to the heuristic)
            chunks_per_worker: Target chunks per worker for the heuristic
            min_chunk_size: Floor on rows per chunk for the heuristic
        """
        self._configure(max_workers=max_workers, chunk_size=chunk_size,
                        chunks_per_worker=chunks_per_worker,
                        min_chunk_size=min_chunk_size)
        try:
            super().__init__(rows, cols, rng, density)
        except ValueError:
            self.close()
            raise

    def _configure(self, max_workers: Optional[int] = None,
                   chunk_size: Optional[int] = None,
                   chunks_per_worker: int = DEFAULT_CHUNKS_PER_WORKER,
                   min_chunk_size: int = MIN_CHUNK_SIZE) -> None:
        if max_workers is None:
            max_workers = available_parallelism()
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunks_per_worker < 1:
            raise ValueError(f"chunks_per_worker must be positive, got {chunks_per_worker}")
        if min_chunk_size < 1:
            raise ValueError(f"min_chunk_size must be positive, got {min_chunk_size}")

        self.max_workers = max_workers
        self._chunk_size = chunk_size
        self.chunks_per_worker = chunks_per_worker
        self.min_chunk_size = min_chunk_size
        self._executor = ThreadPoolExecutor(max_workers=max_workers,
                                            thread_name_prefix="life-worker")

    @property
    def chunk_size(self) -> int:
        """Rows handed to each task per generation."""
        if self._chunk_size is not None:
            return self._chunk_size
        return compute_chunk_size(self.rows, self.max_workers,
                                  self.chunks_per_worker, self.min_chunk_size)

    def _next_generation(self, grid: np.ndarray) -> np.ndarray:
        new_grid = np.empty_like(grid)
        ranges = partition_range(0, grid.shape[0], self.chunk_size)

        def process_rows(start: int, stop: int) -> None:
            advance_rows(grid, new_grid[start:stop], start)

        parallel_for(self._executor, ranges, process_rows)
        return new_grid

    def step(self) -> int:
        """Advance the grid by one generation.

        Blocks until every row chunk has been computed.

        Returns:
            The new generation number
        """
        if self._generation == 0:
            logger.debug(f"Stepping {self.rows} rows in chunks of {self.chunk_size} "
                         f"on {self.max_workers} workers")
        return super().step()

    def close(self) -> None:
        """Shut down the worker pool. The engine cannot step afterwards."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> 'ParallelEngine':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
