"""Tests for row partitioning and the fork-join helper."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from life_engines.core.partition import (
    available_parallelism,
    compute_chunk_size,
    parallel_for,
    partition_range,
)


class TestChunkSize:
    """Test the chunk-size heuristic."""

    @pytest.mark.parametrize("rows, parallelism, expected", [
        (1000, 4, 62),   # 1000 // 16
        (4096, 8, 128),  # 4096 // 32
        (100, 8, 16),    # floor
        (10, 1, 16),     # floor
        (0, 4, 16),
    ])
    def test_heuristic(self, rows, parallelism, expected):
        assert compute_chunk_size(rows, parallelism) == expected

    def test_custom_factors(self):
        assert compute_chunk_size(1000, 4, chunks_per_worker=1, min_chunk_size=1) == 250
        assert compute_chunk_size(10, 4, min_chunk_size=1) == 1

    def test_invalid_parallelism(self):
        with pytest.raises(ValueError):
            compute_chunk_size(100, 0)

    def test_available_parallelism_positive(self):
        assert available_parallelism() >= 1


class TestPartitionRange:
    """Test contiguous range splitting."""

    def test_even_split(self):
        assert partition_range(0, 9, 3) == [(0, 3), (3, 6), (6, 9)]

    def test_short_last_range(self):
        assert partition_range(0, 10, 3) == [(0, 3), (3, 6), (6, 9), (9, 10)]

    def test_chunk_larger_than_range(self):
        assert partition_range(0, 5, 16) == [(0, 5)]

    def test_empty_range(self):
        assert partition_range(4, 4, 2) == []

    @pytest.mark.parametrize("stop, chunk", [(1, 1), (17, 4), (100, 16), (333, 7)])
    def test_cover_each_index_once(self, stop, chunk):
        covered = [i for lo, hi in partition_range(0, stop, chunk) for i in range(lo, hi)]
        assert covered == list(range(stop))

    def test_invalid_chunk(self):
        with pytest.raises(ValueError):
            partition_range(0, 10, 0)


class TestParallelFor:
    """Test fork-join execution over ranges."""

    def setup_method(self):
        self.executor = ThreadPoolExecutor(max_workers=4)

    def teardown_method(self):
        self.executor.shutdown(wait=True)

    def test_all_ranges_complete_before_return(self):
        seen = []
        lock = threading.Lock()

        def body(lo, hi):
            with lock:
                seen.extend(range(lo, hi))

        parallel_for(self.executor, partition_range(0, 50, 4), body)

        assert sorted(seen) == list(range(50))

    def test_disjoint_writes(self):
        """Each task writes only its own slice of a shared buffer."""
        out = [None] * 40

        def body(lo, hi):
            for i in range(lo, hi):
                out[i] = (lo, hi)

        ranges = partition_range(0, 40, 6)
        parallel_for(self.executor, ranges, body)

        for lo, hi in ranges:
            assert out[lo:hi] == [(lo, hi)] * (hi - lo)

    def test_failure_propagates_after_all_tasks(self):
        """First failing range is re-raised once every task has finished."""
        finished = []
        lock = threading.Lock()

        def body(lo, hi):
            if lo in (2, 6):
                raise RuntimeError(f"chunk {lo} failed")
            with lock:
                finished.append(lo)

        with pytest.raises(RuntimeError, match="chunk 2 failed"):
            parallel_for(self.executor, partition_range(0, 10, 2), body)

        assert sorted(finished) == [0, 4, 8]

    def test_no_ranges(self):
        parallel_for(self.executor, [], lambda lo, hi: None)
