"""Error taxonomy for the Game of Life engines and their drivers.

Every error is raised eagerly, before any engine state is touched, and is
never retried. Malformed input is the caller's bug to fix.
"""


class LifeEngineError(Exception):
    """Base class for all engine and driver errors."""


class InvalidDimensionError(LifeEngineError, ValueError):
    """Grid dimensions are not positive integers, or the grid is not 2-D."""


class NullGridError(LifeEngineError, ValueError):
    """An explicit initial grid was missing or contained no cells."""


class InvalidGenerationCountError(LifeEngineError, ValueError):
    """A driver was asked to simulate a non-positive number of generations."""


class NullWriterError(LifeEngineError, TypeError):
    """A driver was given no output sink."""


class NullEngineError(LifeEngineError, TypeError):
    """A driver was given no engine."""
