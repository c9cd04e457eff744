"""Timed comparison of the sequential and parallel engines.

Both engines start from the same grid and run the same number of
generations. Each run's rendered output and total time go to a text file,
and a report records the timings and whether the final grids agree.
"""

import os
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import psutil

from .config import SimulationConfig
from .core.grid import RandomSource, copy_grid, grids_equal, random_grid
from .core.parallel import ParallelEngine
from .core.sequential import SequentialEngine
from .core.engine import LifeEngine
from .exceptions import InvalidGenerationCountError
from .simulation import simulate

logger = logging.getLogger(__name__)

PARALLEL_OUTPUT = "async_simulation.txt"
SEQUENTIAL_OUTPUT = "sync_simulation.txt"


@dataclass
class BenchmarkReport:
    """Outcome of one sequential vs parallel comparison."""
    rows: int
    cols: int
    generations: int
    workers: int
    chunk_size: int
    parallel_seconds: float
    sequential_seconds: float
    grids_match: bool
    rss_mb: float
    parallel_output: str
    sequential_output: str

    @property
    def speedup(self) -> float:
        """Sequential time divided by parallel time."""
        if self.parallel_seconds == 0:
            return 0.0
        return self.sequential_seconds / self.parallel_seconds

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['speedup'] = self.speedup
        return data


def _check_generations(generations: int) -> None:
    if generations <= 0:
        raise InvalidGenerationCountError(f"generations must be positive, got {generations}")


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def warm_up(rng: RandomSource = None) -> None:
    """Step both engines once on a small grid so the kernels are compiled."""
    grid = random_grid(10, 10, rng)

    SequentialEngine.from_grid(grid).step()
    with ParallelEngine.from_grid(grid, max_workers=2) as engine:
        engine.step()

    logger.debug("Warm-up complete")


def run_to_file(engine: LifeEngine, generations: int, path: Union[str, Path],
                alive_char: str, dead_char: str, label: str,
                render: bool = True) -> float:
    """Simulate into a text file and append a total-time summary line.

    Returns:
        Elapsed seconds reported by ``simulate``
    """
    _check_generations(generations)
    with open(path, 'w', encoding='utf-8') as writer:
        elapsed = simulate(engine, generations, writer, alive_char, dead_char, render)
        writer.write(f"\nTotal {label} execution time: {elapsed * 1000:.2f} ms\n")

    logger.info(f"{label.capitalize()} completed in {elapsed * 1000:.2f} ms, saved to {path}")
    return elapsed


def compare_engines(grid, generations: int,
                    config: Optional[SimulationConfig] = None,
                    output_dir: Union[str, Path] = ".",
                    render: bool = True) -> BenchmarkReport:
    """Run the parallel and then the sequential engine on the same grid.

    Args:
        grid: Initial grid shared by both engines
        generations: Number of generations to run
        config: Engine and rendering settings (defaults if None)
        output_dir: Directory receiving the two output files
        render: Write every generation, not only the timing summary

    Returns:
        BenchmarkReport with timings and the final-grid comparison
    """
    _check_generations(generations)
    config = config or SimulationConfig()
    state = copy_grid(grid)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    parallel_path = output_dir / PARALLEL_OUTPUT
    sequential_path = output_dir / SEQUENTIAL_OUTPUT

    logger.info(f"Comparing engines on {state.shape[0]}x{state.shape[1]} grid "
                f"for {generations} generations")

    with ParallelEngine.from_grid(state, **config.engine_options()) as parallel:
        parallel_seconds = run_to_file(parallel, generations, parallel_path,
                                       config.parallel_alive_char, config.parallel_dead_char,
                                       "parallel", render)
        parallel_final = np.array(parallel.current_grid)
        workers = parallel.max_workers
        chunk_size = parallel.chunk_size

    sequential = SequentialEngine.from_grid(state)
    sequential_seconds = run_to_file(sequential, generations, sequential_path,
                                     config.sequential_alive_char, config.sequential_dead_char,
                                     "sequential", render)

    grids_match = grids_equal(parallel_final, sequential.current_grid)
    if not grids_match:
        logger.error("Parallel and sequential engines disagree on the final grid")

    return BenchmarkReport(
        rows=state.shape[0],
        cols=state.shape[1],
        generations=generations,
        workers=workers,
        chunk_size=chunk_size,
        parallel_seconds=parallel_seconds,
        sequential_seconds=sequential_seconds,
        grids_match=grids_match,
        rss_mb=measure_memory_mb(),
        parallel_output=str(parallel_path),
        sequential_output=str(sequential_path),
    )
