"""Simulation core: the neighbor rule, grids, partitioning and both engines."""

from .engine import LifeEngine
from .parallel import ParallelEngine
from .sequential import SequentialEngine

__all__ = [
    'LifeEngine',
    'ParallelEngine',
    'SequentialEngine',
]
