#!/usr/bin/env python3
"""
Generate a batch of puzzles as JSON files.

The adjacency table is validated first; a defective table aborts the run.
Each puzzle is written to its own file under the output directory, grouped
by difficulty band, and a summary of the batch is printed at the end.
"""

import argparse
import json
import logging
import os
import random
import sys
from pathlib import Path

from tqdm import tqdm

# Add parent directory to path to enable imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nepal_traversal.analysis import analyze_puzzles, create_summary_report, format_route
from nepal_traversal.config import get_settings
from nepal_traversal.core import PathCache, PathFinder, PuzzleGenerator, get_district_graph
from nepal_traversal.errors import GraphConfigurationError
from nepal_traversal.logger_config import configure_logging
from nepal_traversal.types import Difficulty

logger = logging.getLogger("nepal_traversal.scripts.generate_puzzles")


def parse_bounds(value: str):
    """Parse 'MIN:MAX' into a pair of ints."""
    try:
        low, high = (int(part) for part in value.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected MIN:MAX, got '{value}'")
    return low, high


def main():
    parser = argparse.ArgumentParser(description="Generate Nepal district traversal puzzles")
    parser.add_argument(
        "--output-dir", type=str, default="puzzles", help="Output directory for JSON files"
    )
    parser.add_argument("--count", type=int, default=10, help="Number of puzzles to generate")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Difficulty band to sample from",
    )
    parser.add_argument(
        "--bounds",
        type=parse_bounds,
        default=None,
        help="Explicit MIN:MAX intermediate count (required for 'any')",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable batches")
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only check the adjacency table and exit",
    )

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    graph = get_district_graph()
    try:
        graph.ensure_valid()
    except GraphConfigurationError as e:
        for defect in e.defects:
            print(f"  {defect}")
        print(f"\nAdjacency table has {len(e.defects)} defect(s)")
        return 1

    print(f"Adjacency table OK: {len(graph)} districts")
    if args.validate_only:
        return 0

    difficulty = Difficulty(args.difficulty)
    if difficulty == Difficulty.ANY and args.bounds is None:
        parser.error("--difficulty any requires --bounds MIN:MAX")

    generator = PuzzleGenerator(
        graph,
        PathFinder(graph, PathCache()),
        rng=random.Random(args.seed),
        max_attempts=settings.MAX_GENERATION_ATTEMPTS,
    )

    output_dir = Path(args.output_dir)
    output_dir.mkdir(exist_ok=True)

    puzzles = []
    for _ in tqdm(range(args.count), desc="Generating puzzles", unit="puzzle"):
        puzzle = generator.generate_or_fallback(difficulty, args.bounds)
        puzzles.append(puzzle)

        band_dir = output_dir / (puzzle.difficulty or difficulty).value
        band_dir.mkdir(exist_ok=True)
        with open(band_dir / f"{puzzle.id}.json", "w") as f:
            json.dump(puzzle.model_dump(mode="json"), f, indent=2)

        logger.debug("Wrote %s: %s", puzzle.id, format_route(puzzle.shortest_path, 80))

    print()
    print(create_summary_report(analyze_puzzles(puzzles, graph)))
    print(f"\nPuzzles written to {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
