"""Shared fixtures for engine tests."""

import pytest

from life_engines.core.parallel import ParallelEngine
from life_engines.core.sequential import SequentialEngine


@pytest.fixture
def make_engine():
    """Factory building either engine from a grid; parallel pools are closed afterwards."""
    created = []

    def factory(kind, grid, **options):
        if kind == "sequential":
            engine = SequentialEngine.from_grid(grid, **options)
        else:
            options.setdefault("max_workers", 4)
            options.setdefault("chunk_size", 2)
            engine = ParallelEngine.from_grid(grid, **options)
            created.append(engine)
        return engine

    yield factory

    for engine in created:
        engine.close()
