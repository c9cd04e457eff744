"""Runtime configuration for engine comparisons.

Values come from keyword arguments or, through ``SimulationConfig.from_env``,
from ``LIFE_*`` environment variables.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

from .core.partition import DEFAULT_CHUNKS_PER_WORKER, MIN_CHUNK_SIZE


@dataclass
class SimulationConfig:
    """Configuration for building engines and rendering their output."""
    max_workers: Optional[int] = None  # None = CPU count
    chunk_size: Optional[int] = None  # None = heuristic
    chunks_per_worker: int = DEFAULT_CHUNKS_PER_WORKER
    min_chunk_size: int = MIN_CHUNK_SIZE
    density: float = 0.5
    seed: Optional[int] = None
    parallel_alive_char: str = '●'
    parallel_dead_char: str = '○'
    sequential_alive_char: str = '■'
    sequential_dead_char: str = '·'

    def __post_init__(self):
        for name in ('max_workers', 'chunk_size'):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.chunks_per_worker < 1:
            raise ValueError(f"chunks_per_worker must be positive, got {self.chunks_per_worker}")
        if self.min_chunk_size < 1:
            raise ValueError(f"min_chunk_size must be positive, got {self.min_chunk_size}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be between 0 and 1, got {self.density}")
        for name in ('parallel_alive_char', 'parallel_dead_char',
                     'sequential_alive_char', 'sequential_dead_char'):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character")

    @classmethod
    def from_env(cls, **overrides: Any) -> 'SimulationConfig':
        """Create configuration from environment variables.

        Reads LIFE_WORKERS, LIFE_CHUNK_SIZE, LIFE_CHUNKS_PER_WORKER,
        LIFE_MIN_CHUNK_SIZE, LIFE_DENSITY and LIFE_SEED. Keyword overrides
        take precedence over the environment.
        """
        values = {
            'max_workers': _env_int('LIFE_WORKERS'),
            'chunk_size': _env_int('LIFE_CHUNK_SIZE'),
            'chunks_per_worker': _env_int('LIFE_CHUNKS_PER_WORKER', DEFAULT_CHUNKS_PER_WORKER),
            'min_chunk_size': _env_int('LIFE_MIN_CHUNK_SIZE', MIN_CHUNK_SIZE),
            'density': float(os.getenv('LIFE_DENSITY', '0.5')),
            'seed': _env_int('LIFE_SEED'),
        }
        values.update(overrides)
        return cls(**values)

    def engine_options(self) -> dict:
        """Keyword arguments for constructing a ``ParallelEngine``."""
        return {
            'max_workers': self.max_workers,
            'chunk_size': self.chunk_size,
            'chunks_per_worker': self.chunks_per_worker,
            'min_chunk_size': self.min_chunk_size,
        }


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
