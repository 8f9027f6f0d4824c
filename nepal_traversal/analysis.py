"""
Statistics and formatting for batches of puzzles.

Used by the batch generation script to summarise what the sampler
produced: how long the routes are, how the difficulty bands fill up, and
how many alternative shortest routes each puzzle admits.
"""

from collections import Counter
from typing import Dict, List, NamedTuple, Optional, Sequence

from nepal_traversal.core.adjacency_graph import AdjacencyGraph
from nepal_traversal.core.path_counter import count_shortest_routes
from nepal_traversal.core.puzzle_generator import classify_difficulty
from nepal_traversal.models import Puzzle


class PuzzleStatistics(NamedTuple):
    """Statistics about a collection of puzzles."""

    total_puzzles: int
    intermediate_distribution: Dict[int, int]
    difficulty_distribution: Dict[str, int]
    route_count_distribution: Dict[int, int]


def format_route(path: Sequence[str], max_width: Optional[int] = None) -> str:
    """
    Format a route as a string with arrows.

    Args:
        path: The route to format
        max_width: Optional maximum width (truncates in the middle)
    """
    formatted = " -> ".join(path)

    if max_width and len(formatted) > max_width:
        half = (max_width - 5) // 2
        formatted = formatted[:half] + " ... " + formatted[-half:]

    return formatted


def route_count(puzzle: Puzzle, graph: AdjacencyGraph) -> int:
    """Number of equally short routes between the puzzle's endpoints."""
    start = graph.normalize(puzzle.start)
    end = graph.normalize(puzzle.end)
    return count_shortest_routes(graph.adjacency, start, end).count


def analyze_puzzles(puzzles: List[Puzzle], graph: AdjacencyGraph) -> PuzzleStatistics:
    """Compute the distributions in a single pass."""
    intermediate_counter = Counter()
    difficulty_counter = Counter()
    route_counter = Counter()

    for puzzle in puzzles:
        intermediate_counter[puzzle.intermediate_count] += 1
        difficulty = puzzle.difficulty or classify_difficulty(puzzle.intermediate_count)
        difficulty_counter[difficulty.value] += 1
        route_counter[route_count(puzzle, graph)] += 1

    return PuzzleStatistics(
        total_puzzles=len(puzzles),
        intermediate_distribution=dict(intermediate_counter),
        difficulty_distribution=dict(difficulty_counter),
        route_count_distribution=dict(route_counter),
    )


def create_summary_report(stats: PuzzleStatistics, width: int = 70) -> str:
    """Plain-text summary of puzzle statistics."""
    lines = ["PUZZLE BATCH SUMMARY", "=" * width, f"Total puzzles: {stats.total_puzzles:,}"]
    if not stats.total_puzzles:
        return "\n".join(lines)

    lines.append("\nIntermediate districts:")
    for count in sorted(stats.intermediate_distribution):
        n = stats.intermediate_distribution[count]
        percentage = n / stats.total_puzzles * 100
        bar = "█" * int(percentage / 2)
        lines.append(f"  {count:2d}: {n:,} ({percentage:.1f}%) {bar}")

    lines.append("\nDifficulty bands:")
    for name in sorted(stats.difficulty_distribution):
        lines.append(f"  {name}: {stats.difficulty_distribution[name]:,}")

    lines.append("\nAlternative shortest routes per puzzle:")
    for routes in sorted(stats.route_count_distribution):
        lines.append(f"  {routes} route(s): {stats.route_count_distribution[routes]:,}")

    return "\n".join(lines)
