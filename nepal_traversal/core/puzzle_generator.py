"""
Puzzle generation by rejection sampling.

Random district pairs are drawn until the canonical route between them has
an intermediate count inside the requested band. Sampling over an
irregular graph can miss a band, so generation may return None and callers
fall back to the hand-verified table below.
"""

import datetime
import logging
import random
from typing import List, Optional, Sequence, Tuple

from nepal_traversal.constants import (
    DIFFICULTY_BANDS,
    MAX_INTERMEDIATE_DISTRICTS,
    MAX_PUZZLE_GENERATION_ATTEMPTS,
    MIN_INTERMEDIATE_DISTRICTS,
)
from nepal_traversal.core.adjacency_graph import AdjacencyGraph
from nepal_traversal.core.path_finder import PathFinder
from nepal_traversal.models import Puzzle
from nepal_traversal.types import Difficulty
from nepal_traversal.utils import day_of_year, generate_puzzle_id

logger = logging.getLogger(__name__)

Bounds = Tuple[int, int]


# Hand-verified against the district table: each path is a shortest route.
FALLBACK_PUZZLES: Tuple[Puzzle, ...] = (
    Puzzle(
        id="daily_1",
        start="Bhaktapur",
        end="Nuwakot",
        shortest_path=("Bhaktapur", "Kathmandu", "Nuwakot"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_2",
        start="Lalitpur",
        end="Rasuwa",
        shortest_path=("Lalitpur", "Kathmandu", "Nuwakot", "Rasuwa"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_3",
        start="Chitwan",
        end="Kaski",
        shortest_path=("Chitwan", "Tanahu", "Kaski"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_4",
        start="Jhapa",
        end="Sunsari",
        shortest_path=("Jhapa", "Morang", "Sunsari"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_5",
        start="Banke",
        end="Kanchanpur",
        shortest_path=("Banke", "Bardiya", "Kailali", "Kanchanpur"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_6",
        start="Mustang",
        end="Rukum",
        shortest_path=("Mustang", "Dolpa", "Rukum"),
        difficulty=Difficulty.EASY,
    ),
    Puzzle(
        id="daily_7",
        start="Kathmandu",
        end="Kaski",
        shortest_path=("Kathmandu", "Dhading", "Gorkha", "Lamjung", "Kaski"),
        difficulty=Difficulty.MEDIUM,
    ),
    Puzzle(
        id="daily_8",
        start="Kathmandu",
        end="Jhapa",
        shortest_path=(
            "Kathmandu",
            "Kavrepalanchok",
            "Sindhuli",
            "Udayapur",
            "Sunsari",
            "Morang",
            "Jhapa",
        ),
        difficulty=Difficulty.MEDIUM,
    ),
    Puzzle(
        id="daily_9",
        start="Kathmandu",
        end="Banke",
        shortest_path=(
            "Kathmandu",
            "Dhading",
            "Chitwan",
            "Tanahu",
            "Palpa",
            "Arghakhanchi",
            "Dang",
            "Banke",
        ),
        difficulty=Difficulty.HARD,
    ),
    Puzzle(
        id="daily_10",
        start="Kaski",
        end="Ilam",
        shortest_path=(
            "Kaski",
            "Tanahu",
            "Chitwan",
            "Makwanpur",
            "Sindhuli",
            "Udayapur",
            "Bhojpur",
            "Dhankuta",
            "Ilam",
        ),
        difficulty=Difficulty.HARD,
    ),
)


def daily_puzzle(date: datetime.date, puzzles: Sequence[Puzzle] = FALLBACK_PUZZLES) -> Puzzle:
    """The fixed puzzle for a calendar day, cycling through the table."""
    return puzzles[day_of_year(date) % len(puzzles)]


def classify_difficulty(intermediate_count: int) -> Difficulty:
    """Name the band an intermediate count falls in (counts above hard stay hard)."""
    if intermediate_count <= DIFFICULTY_BANDS[Difficulty.EASY][1]:
        return Difficulty.EASY
    if intermediate_count <= DIFFICULTY_BANDS[Difficulty.MEDIUM][1]:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def resolve_bounds(difficulty: Difficulty, bounds: Optional[Bounds] = None) -> Bounds:
    """
    Intermediate-count range for a request.

    Explicit bounds win over the band table; Difficulty.ANY requires them.
    """
    difficulty = Difficulty(difficulty)
    if bounds is None:
        if difficulty == Difficulty.ANY:
            raise ValueError("Difficulty 'any' requires explicit (min, max) bounds")
        return DIFFICULTY_BANDS[difficulty]

    low, high = bounds
    if low < 0 or high < low:
        raise ValueError(f"Invalid intermediate bounds: {bounds}")
    return low, high


class PuzzleGenerator:
    """
    Samples start/end pairs whose canonical route fits a difficulty band.

    Attributes:
        graph: District graph to sample from
        path_finder: Route search (shared cache, if any)
        rng: Random source; pass a seeded random.Random for repeatability
        max_attempts: Sampling bound before giving up
    """

    def __init__(
        self,
        graph: AdjacencyGraph,
        path_finder: Optional[PathFinder] = None,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PUZZLE_GENERATION_ATTEMPTS,
    ):
        self.graph = graph
        self.path_finder = path_finder or PathFinder(graph)
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def build_puzzle(
        self,
        start,
        end,
        puzzle_id: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> Optional[Puzzle]:
        """
        Puzzle for a given pair using the canonical route.

        Returns None when either name is unknown, the names are the same
        district, or no route exists.
        """
        path = self.path_finder.shortest_path(start, end)
        if path is None or len(path) < 2:
            return None

        return Puzzle(
            id=puzzle_id or generate_puzzle_id(self.rng),
            start=self.graph.display_name(path[0]),
            end=self.graph.display_name(path[-1]),
            shortest_path=tuple(self.graph.display_name(node) for node in path),
            difficulty=difficulty or classify_difficulty(len(path) - 2),
        )

    def generate(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        bounds: Optional[Bounds] = None,
    ) -> Optional[Puzzle]:
        """
        Sample a puzzle in the requested band.

        Returns None once max_attempts pairs have been rejected.
        """
        low, high = resolve_bounds(difficulty, bounds)
        nodes = self.graph.nodes
        if len(nodes) < 2:
            return None

        for attempt in range(1, self.max_attempts + 1):
            start, end = self.rng.sample(nodes, 2)
            path = self.path_finder.shortest_path(start, end)
            if path is None:
                continue

            intermediate_count = len(path) - 2
            if low <= intermediate_count <= high:
                logger.debug(
                    "Accepted %s -> %s (%d intermediates) after %d attempt(s)",
                    start, end, intermediate_count, attempt,
                )
                return self.build_puzzle(
                    start, end, difficulty=classify_difficulty(intermediate_count)
                )

        logger.warning(
            "No puzzle with %d..%d intermediates after %d attempts",
            low, high, self.max_attempts,
        )
        return None

    def generate_or_fallback(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        bounds: Optional[Bounds] = None,
        fallbacks: Sequence[Puzzle] = FALLBACK_PUZZLES,
    ) -> Puzzle:
        """Generate, or pick from the fallback table (preferring the same band)."""
        puzzle = self.generate(difficulty, bounds)
        if puzzle is not None:
            return puzzle

        low, high = resolve_bounds(difficulty, bounds)
        in_band = [p for p in fallbacks if low <= p.intermediate_count <= high]
        choice = self.rng.choice(in_band or list(fallbacks))
        logger.warning("Falling back to fixed puzzle %s", choice.id)
        return choice

    def validate_puzzle(self, puzzle: Puzzle) -> List[str]:
        """
        Check a puzzle against the graph and return every problem found.

        The path must consist of known districts joined by real edges and
        be as short as the true shortest route.
        """
        problems = []
        nodes = []
        for district in puzzle.shortest_path:
            node = self.graph.normalize(district)
            if node is None:
                problems.append(f"Unknown district in path: {district}")
            nodes.append(node)
        if problems:
            return problems

        for a, b in zip(nodes, nodes[1:]):
            if not self.graph.has_edge(a, b):
                problems.append(
                    f"{self.graph.display_name(a)} and {self.graph.display_name(b)} are not adjacent"
                )

        true_length = self.path_finder.bounded_distance(nodes[0], nodes[-1])
        if true_length < len(nodes) - 1:
            problems.append(
                f"Path has {len(nodes) - 1} steps but the shortest route has {true_length}"
            )

        if puzzle.intermediate_count > MAX_INTERMEDIATE_DISTRICTS:
            logger.warning(
                "Puzzle %s has %d intermediate districts (recommended max: %d)",
                puzzle.id, puzzle.intermediate_count, MAX_INTERMEDIATE_DISTRICTS,
            )
        elif puzzle.intermediate_count < MIN_INTERMEDIATE_DISTRICTS:
            logger.info("Puzzle %s has adjacent endpoints; any guess wins", puzzle.id)
        return problems
