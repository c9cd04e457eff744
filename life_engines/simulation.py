"""Driving engines for many generations and rendering grids as text.

A rendered grid is one character per cell and one line per row. Successive
generations are separated by a blank line and headed with their number and
the time spent stepping so far.
"""

import asyncio
import functools
import logging
import time
from typing import Optional, TextIO

import numpy as np

from .core.engine import LifeEngine
from .exceptions import InvalidGenerationCountError, NullEngineError, NullWriterError

logger = logging.getLogger(__name__)

DEFAULT_ALIVE_CHAR = '■'
DEFAULT_DEAD_CHAR = '·'


def render_grid(grid: np.ndarray, alive_char: str = DEFAULT_ALIVE_CHAR,
                dead_char: str = DEFAULT_DEAD_CHAR) -> str:
    """Render a grid row by row, each row terminated by a newline."""
    lines = [''.join(alive_char if cell else dead_char for cell in row) for row in grid]
    return ''.join(line + '\n' for line in lines)


def write_generation(writer: TextIO, grid: np.ndarray, generation: int, elapsed: float,
                     alive_char: str = DEFAULT_ALIVE_CHAR,
                     dead_char: str = DEFAULT_DEAD_CHAR) -> None:
    """Write one generation block: header, grid, blank line.

    Args:
        writer: Text sink
        grid: Grid to render
        generation: Generation number shown in the header
        elapsed: Seconds spent stepping so far
        alive_char: Character for live cells
        dead_char: Character for dead cells
    """
    writer.write(f"Generation {generation} [Elapsed: {elapsed * 1000:.2f} ms]\n")
    writer.write(render_grid(grid, alive_char, dead_char))
    writer.write("\n")


def _check_arguments(engine: Optional[LifeEngine], generations: int,
                     writer: Optional[TextIO]) -> None:
    if engine is None:
        raise NullEngineError("engine must not be None")
    if writer is None:
        raise NullWriterError("writer must not be None")
    if generations <= 0:
        raise InvalidGenerationCountError(f"generations must be positive, got {generations}")


def simulate(engine: LifeEngine, generations: int, writer: TextIO,
             alive_char: str = DEFAULT_ALIVE_CHAR, dead_char: str = DEFAULT_DEAD_CHAR,
             render: bool = True) -> float:
    """Step an engine for a number of generations, writing each one.

    All arguments are checked before the first step, so a rejected call
    leaves the engine untouched.

    Args:
        engine: Engine to drive
        generations: Number of steps to take (positive)
        writer: Text sink for rendered generations
        alive_char: Character for live cells
        dead_char: Character for dead cells
        render: Write every generation to ``writer`` when True

    Returns:
        Seconds spent inside ``engine.step()``; rendering is not timed

    Raises:
        NullEngineError: If engine is None
        NullWriterError: If writer is None
        InvalidGenerationCountError: If generations is not positive
    """
    _check_arguments(engine, generations, writer)

    elapsed = 0.0
    for _ in range(generations):
        start = time.perf_counter()
        generation = engine.step()
        elapsed += time.perf_counter() - start
        if render:
            write_generation(writer, engine.current_grid, generation,
                             elapsed, alive_char, dead_char)

    logger.debug(f"{type(engine).__name__}: {generations} generations in {elapsed * 1000:.2f} ms")
    return elapsed


async def simulate_async(engine: LifeEngine, generations: int, writer: TextIO,
                         alive_char: str = DEFAULT_ALIVE_CHAR,
                         dead_char: str = DEFAULT_DEAD_CHAR,
                         render: bool = True) -> float:
    """Run ``simulate`` on the event loop's default executor.

    For callers inside an asyncio application that must not block the loop.
    """
    _check_arguments(engine, generations, writer)

    loop = asyncio.get_running_loop()
    call = functools.partial(simulate, engine, generations, writer,
                             alive_char, dead_char, render)
    return await loop.run_in_executor(None, call)
