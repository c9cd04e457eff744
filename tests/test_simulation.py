"""Tests for grid rendering and the simulate drivers."""

import asyncio
import io
import time

import pytest
import numpy as np

from life_engines.core.patterns import blinker, place_pattern
from life_engines.core.sequential import SequentialEngine
from life_engines.exceptions import (
    InvalidGenerationCountError,
    NullEngineError,
    NullWriterError,
)
from life_engines.simulation import render_grid, simulate, simulate_async, write_generation

ENGINE_KINDS = ["sequential", "parallel"]


class SlowWriter(io.StringIO):
    """StringIO that stalls on every generation header."""

    def __init__(self, delay):
        super().__init__()
        self.delay = delay

    def write(self, text):
        if text.startswith("Generation "):
            time.sleep(self.delay)
        return super().write(text)


class TestRendering:
    """Test text rendering of grids."""

    def test_render_grid(self):
        grid = np.array([[True, False, False], [False, True, True]], dtype=bool)
        assert render_grid(grid, 'O', '.') == "O..\n.OO\n"

    def test_render_default_chars(self):
        grid = np.array([[True, False]], dtype=bool)
        assert render_grid(grid) == "■·\n"

    def test_write_generation(self):
        writer = io.StringIO()
        grid = np.array([[False, True]], dtype=bool)

        write_generation(writer, grid, 3, 0.0015, '#', ' ')

        assert writer.getvalue() == "Generation 3 [Elapsed: 1.50 ms]\n #\n\n"


class TestSimulate:
    """Test the synchronous driver."""

    def setup_method(self):
        self.grid = place_pattern(blinker(), 5, 5, 2, 1)
        self.engine = SequentialEngine.from_grid(self.grid)

    @pytest.mark.parametrize("kind", ENGINE_KINDS)
    def test_runs_generations(self, kind, make_engine):
        engine = make_engine(kind, self.grid)
        writer = io.StringIO()

        elapsed = simulate(engine, 4, writer, 'O', '.')

        assert elapsed >= 0.0
        assert engine.generation == 4
        assert writer.getvalue().count("Generation ") == 4

    def test_output_format(self):
        writer = io.StringIO()
        simulate(self.engine, 2, writer, 'O', '.')

        blocks = writer.getvalue().split("\n\n")
        assert blocks[0].startswith("Generation 1 [Elapsed: ")
        assert blocks[0].splitlines()[1:] == [".....", "..O..", "..O..", "..O..", "....."]
        assert blocks[1].startswith("Generation 2 [Elapsed: ")
        assert blocks[1].splitlines()[1:] == [".....", ".....", ".OOO.", ".....", "....."]

    def test_render_disabled(self):
        writer = io.StringIO()
        simulate(self.engine, 3, writer, render=False)

        assert writer.getvalue() == ""
        assert self.engine.generation == 3

    def test_elapsed_excludes_rendering(self):
        """Only stepping is timed, not writing generations out."""
        writer = SlowWriter(0.05)

        start = time.perf_counter()
        elapsed = simulate(self.engine, 3, writer)
        wall = time.perf_counter() - start

        assert writer.getvalue().count("Generation ") == 3
        assert wall - elapsed >= 0.15

    @pytest.mark.parametrize("generations", [0, -1, -10])
    def test_non_positive_generations(self, generations):
        """Rejected before any step, engine untouched."""
        with pytest.raises(InvalidGenerationCountError):
            simulate(self.engine, generations, io.StringIO())

        assert self.engine.generation == 0
        assert np.array_equal(self.engine.current_grid, self.grid)

    def test_null_writer(self):
        with pytest.raises(NullWriterError):
            simulate(self.engine, 3, None)
        assert self.engine.generation == 0

    def test_null_engine(self):
        with pytest.raises(NullEngineError):
            simulate(None, 3, io.StringIO())

    def test_validation_order(self):
        """Engine is checked before writer, writer before generation count."""
        with pytest.raises(NullEngineError):
            simulate(None, 0, None)
        with pytest.raises(NullWriterError):
            simulate(self.engine, 0, None)

    def test_error_types(self):
        """Errors are also standard ValueError / TypeError."""
        with pytest.raises(ValueError):
            simulate(self.engine, 0, io.StringIO())
        with pytest.raises(TypeError):
            simulate(self.engine, 1, None)


class TestSimulateAsync:
    """Test the awaitable driver."""

    def test_runs_to_completion(self, make_engine):
        engine = make_engine("parallel", place_pattern(blinker(), 5, 5, 2, 1))
        writer = io.StringIO()

        elapsed = asyncio.run(simulate_async(engine, 5, writer))

        assert elapsed >= 0.0
        assert engine.generation == 5
        assert writer.getvalue().count("Generation ") == 5

    def test_validation(self):
        engine = SequentialEngine(4, 4, rng=0)

        with pytest.raises(NullWriterError):
            asyncio.run(simulate_async(engine, 3, None))
        with pytest.raises(InvalidGenerationCountError):
            asyncio.run(simulate_async(engine, 0, io.StringIO()))
        with pytest.raises(NullEngineError):
            asyncio.run(simulate_async(None, 3, io.StringIO()))

        assert engine.generation == 0
