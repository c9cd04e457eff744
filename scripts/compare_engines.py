#!/usr/bin/env python3
"""
Sequential vs Parallel Game of Life Comparison

Runs both engines over the same initial grid, writes every generation to
async_simulation.txt (parallel) and sync_simulation.txt (sequential), and
prints the timings.
"""

import sys
import os
import json
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from life_engines.benchmark import compare_engines, warm_up
from life_engines.config import SimulationConfig
from life_engines.core.grid import random_grid
from life_engines.core.patterns import predefined_grid
from life_engines.exceptions import LifeEngineError

logger = logging.getLogger(__name__)


def build_grid(pattern: str, rows: int, cols: int, config: SimulationConfig):
    """Initial grid for the comparison run."""
    if pattern == "random":
        return random_grid(rows, cols, config.seed, config.density)
    return predefined_grid()


def main():
    """Main entry point for the engine comparison."""
    import argparse

    parser = argparse.ArgumentParser(description="Compare sequential and parallel Game of Life engines")
    parser.add_argument("--pattern", choices=["predefined", "random"], default="predefined",
                        help="Initial grid: two-ring demo field or random cells")
    parser.add_argument("--rows", type=int, default=512, help="Rows for a random grid")
    parser.add_argument("--cols", type=int, default=512, help="Columns for a random grid")
    parser.add_argument("--generations", type=int, default=100, help="Generations to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random grid")
    parser.add_argument("--workers", type=int, default=None, help="Parallel worker threads")
    parser.add_argument("--output-dir", default=".", help="Directory for the output files")
    parser.add_argument("--no-render", action="store_true",
                        help="Only write timing summaries, not every generation")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        overrides = {}
        if args.seed is not None:
            overrides['seed'] = args.seed
        if args.workers is not None:
            overrides['max_workers'] = args.workers
        config = SimulationConfig.from_env(**overrides)

        grid = build_grid(args.pattern, args.rows, args.cols, config)
        warm_up(config.seed)
        report = compare_engines(grid, args.generations, config, args.output_dir,
                                 render=not args.no_render)
    except (LifeEngineError, ValueError) as e:
        logger.error(f"Comparison failed: {e}")
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(f"\nGrid:            {report.rows}x{report.cols}, {report.generations} generations")
        print(f"Workers:         {report.workers} (chunks of {report.chunk_size} rows)")
        print(f"Parallel time:   {report.parallel_seconds * 1000:.2f} ms -> {report.parallel_output}")
        print(f"Sequential time: {report.sequential_seconds * 1000:.2f} ms -> {report.sequential_output}")
        print(f"Speedup:         {report.speedup:.2f}x")
        print(f"Grids match:     {report.grids_match}")
        print(f"Memory (RSS):    {report.rss_mb:.1f} MB")

    return 0 if report.grids_match else 1


if __name__ == "__main__":
    sys.exit(main())
