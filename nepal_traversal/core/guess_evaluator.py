"""
Guess classification.

Checks run in a fixed order and the first match wins:

    1. unknown text        -> invalid
    2. already guessed     -> duplicate
    3. start or end        -> invalid
    4. on a shortest route -> exact
    5. otherwise           -> near / medium / far by distance to the routes

A name that is both a repeat and an endpoint is therefore a duplicate.
"""

import logging
import math
from typing import AbstractSet, List, Optional

from nepal_traversal.constants import FEEDBACK_BFS_MAX_DEPTH, MEDIUM_DISTANCE, NEAR_DISTANCE
from nepal_traversal.core.adjacency_graph import AdjacencyGraph
from nepal_traversal.core.path_finder import PathFinder
from nepal_traversal.models import Guess, Puzzle
from nepal_traversal.types import Distance, GuessTier, NodeName, Path
from nepal_traversal.utils import sanitize_input

logger = logging.getLogger(__name__)


def tier_for_distance(distance: int) -> GuessTier:
    if distance == NEAR_DISTANCE:
        return GuessTier.NEAR
    if distance == MEDIUM_DISTANCE:
        return GuessTier.MEDIUM
    return GuessTier.FAR


class GuessEvaluator:
    """Classifies guesses against a puzzle; holds no per-game state."""

    def __init__(
        self,
        graph: AdjacencyGraph,
        path_finder: Optional[PathFinder] = None,
        max_depth: int = FEEDBACK_BFS_MAX_DEPTH,
    ):
        self.graph = graph
        self.path_finder = path_finder or PathFinder(graph)
        self.max_depth = max_depth

    def evaluate(
        self,
        raw_guess: str,
        puzzle: Puzzle,
        prior_guesses: AbstractSet[NodeName] = frozenset(),
        routes: Optional[List[Path]] = None,
    ) -> Guess:
        """
        Classify one guess.

        Args:
            raw_guess: Text as typed by the player
            puzzle: Puzzle being played
            prior_guesses: Node keys already guessed
            routes: Precomputed all_shortest_paths for the puzzle, if the
                caller caches them

        Returns:
            Guess carrying the tier and distance; no prose
        """
        node = self.graph.normalize(raw_guess)
        if node is None:
            logger.debug("Unrecognised guess %r", raw_guess)
            return Guess(
                district=sanitize_input(raw_guess),
                is_correct=False,
                tier=GuessTier.INVALID,
            )

        district = self.graph.display_name(node)

        if node in prior_guesses:
            return Guess(district=district, is_correct=False, tier=GuessTier.DUPLICATE)

        start = self.graph.normalize(puzzle.start)
        end = self.graph.normalize(puzzle.end)
        if node in (start, end):
            return Guess(district=district, is_correct=False, tier=GuessTier.INVALID)

        if routes is None:
            routes = self.path_finder.all_shortest_paths(start, end)

        for route in routes:
            intermediates = route[1:-1]
            if node in intermediates:
                return Guess(
                    district=district,
                    is_correct=True,
                    tier=GuessTier.EXACT,
                    distance_from_path=0,
                    path_position=intermediates.index(node) + 1,
                )

        distance = self.distance_to_routes(node, routes)
        tier = tier_for_distance(distance)
        logger.debug("Guess %s is %s away from the routes (%s)", node, distance, tier.value)
        return Guess(
            district=district,
            is_correct=False,
            tier=tier,
            distance_from_path=distance,
        )

    def distance_to_routes(self, node: NodeName, routes: List[Path]) -> Distance:
        """Smallest bounded distance from node to any district of any route."""
        route_nodes = dict.fromkeys(n for route in routes for n in route)
        if not route_nodes:
            return math.inf
        return min(
            self.path_finder.bounded_distance(node, route_node, self.max_depth)
            for route_node in route_nodes
        )
