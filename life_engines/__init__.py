"""
Conway's Game of Life: sequential and parallel engines

Two engines with one contract (step, restart, current_grid, generation).
The parallel engine splits rows across a thread pool and produces grids
bit-identical to the sequential reference.
"""

from .config import SimulationConfig
from .core import LifeEngine, ParallelEngine, SequentialEngine
from .exceptions import (
    InvalidDimensionError,
    InvalidGenerationCountError,
    LifeEngineError,
    NullEngineError,
    NullGridError,
    NullWriterError,
)
from .simulation import render_grid, simulate, simulate_async, write_generation

__version__ = "0.1.0"

__all__ = [
    'InvalidDimensionError',
    'InvalidGenerationCountError',
    'LifeEngine',
    'LifeEngineError',
    'NullEngineError',
    'NullGridError',
    'NullWriterError',
    'ParallelEngine',
    'SequentialEngine',
    'SimulationConfig',
    'render_grid',
    'simulate',
    'simulate_async',
    'write_generation',
]
