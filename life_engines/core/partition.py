"""Row partitioning and fork-join execution for the parallel engine.

Work is split into contiguous half-open index ranges. Each range runs as one
task on a thread pool and the caller blocks until every task has finished.
Ranges never overlap, so tasks that write only inside their own range need
no locking.
"""

import os
from concurrent.futures import Executor, Future
from typing import Callable, List, Tuple

DEFAULT_CHUNKS_PER_WORKER = 4
MIN_CHUNK_SIZE = 16

IndexRange = Tuple[int, int]


def available_parallelism() -> int:
    """Number of logical CPUs usable by this process (at least 1)."""
    return os.cpu_count() or 1


def compute_chunk_size(total_rows: int, parallelism: int,
                       chunks_per_worker: int = DEFAULT_CHUNKS_PER_WORKER,
                       min_chunk_size: int = MIN_CHUNK_SIZE) -> int:
    """Rows per chunk for a grid of ``total_rows`` rows.

    Aims for about ``chunks_per_worker`` chunks per worker, but never fewer
    than ``min_chunk_size`` rows per chunk.

    Args:
        total_rows: Number of rows to partition
        parallelism: Number of workers
        chunks_per_worker: Target chunks per worker
        min_chunk_size: Floor on rows per chunk

    Returns:
        Chunk size in rows (>= 1)
    """
    if parallelism < 1 or chunks_per_worker < 1 or min_chunk_size < 1:
        raise ValueError("parallelism, chunks_per_worker and min_chunk_size must be positive")

    chunk_size = total_rows // (parallelism * chunks_per_worker)
    return max(chunk_size, min_chunk_size)


def partition_range(start: int, stop: int, chunk_size: int) -> List[IndexRange]:
    """Split [start, stop) into contiguous ranges of at most ``chunk_size``.

    The last range may be shorter. An empty interval yields no ranges.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    return [(lo, min(lo + chunk_size, stop)) for lo in range(start, stop, chunk_size)]


def parallel_for(executor: Executor, ranges: List[IndexRange],
                 body: Callable[[int, int], None]) -> None:
    """Run ``body(start, stop)`` for every range and wait for all of them.

    Every task is waited on even when one fails; the first failure (in range
    order) is then re-raised.

    Args:
        executor: Pool to run tasks on
        ranges: Disjoint index ranges
        body: Callable processing one range
    """
    futures: List[Future] = [executor.submit(body, lo, hi) for lo, hi in ranges]

    error = None
    for future in futures:
        exc = future.exception()
        if exc is not None and error is None:
            error = exc

    if error is not None:
        raise error
