"""
GameSession - guess history and win detection for one puzzle.

A player wins by naming every intermediate district of any one shortest
route, not necessarily the canonical one. The routes and their
intermediate sets are computed once when a puzzle is loaded.
"""

import logging
from typing import FrozenSet, List, Optional, Set, Tuple

from nepal_traversal.config import EngineSettings, get_settings
from nepal_traversal.core.adjacency_graph import AdjacencyGraph, get_district_graph
from nepal_traversal.core.guess_evaluator import GuessEvaluator
from nepal_traversal.core.path_finder import PathCache, PathFinder
from nepal_traversal.core.puzzle_generator import PuzzleGenerator
from nepal_traversal.errors import InvalidPuzzleError
from nepal_traversal.models import GameProgress, Guess, Puzzle
from nepal_traversal.types import GameStatus, GuessTier, NodeName, Path

logger = logging.getLogger(__name__)


class GameSession:
    """
    State machine for a single game.

    States:
        PLAYING -> WON on a guess that completes some shortest route
        WON -> PLAYING only through undo()

    Attributes:
        graph: District graph
        evaluator: Guess classifier
    """

    def __init__(
        self,
        puzzle: Puzzle,
        graph: AdjacencyGraph,
        path_finder: Optional[PathFinder] = None,
        evaluator: Optional[GuessEvaluator] = None,
    ):
        self.graph = graph
        self.path_finder = path_finder or PathFinder(graph)
        self.evaluator = evaluator or GuessEvaluator(graph, self.path_finder)
        self._load(puzzle)

    @classmethod
    def from_settings(
        cls,
        puzzle: Puzzle,
        settings: Optional[EngineSettings] = None,
        cache: Optional[PathCache] = None,
    ) -> "GameSession":
        """Session over the district graph with feedback depth taken from settings."""
        settings = settings or get_settings()
        graph = get_district_graph()
        path_finder = PathFinder(graph, cache if cache is not None else PathCache())
        evaluator = GuessEvaluator(graph, path_finder, max_depth=settings.FEEDBACK_MAX_DEPTH)
        return cls(puzzle, graph, path_finder, evaluator)

    def _load(self, puzzle: Puzzle) -> None:
        """Replace every piece of per-game state; rejects puzzles the graph contradicts."""
        problems = PuzzleGenerator(self.graph, self.path_finder).validate_puzzle(puzzle)
        if problems:
            raise InvalidPuzzleError(puzzle.id, problems)

        routes = self.path_finder.all_shortest_paths(puzzle.start, puzzle.end)
        if not routes:
            raise InvalidPuzzleError(
                puzzle.id, [f"No route from {puzzle.start} to {puzzle.end}"]
            )
        route_sets = tuple(frozenset(route[1:-1]) for route in routes)

        self._puzzle = puzzle
        self._routes: Tuple[Path, ...] = tuple(routes)
        self._route_intermediates: Tuple[FrozenSet[NodeName], ...] = route_sets
        self._required: FrozenSet[NodeName] = frozenset().union(*route_sets)
        self._history: List[Guess] = []
        self._status = GameStatus.PLAYING
        self._last_guess: Optional[Guess] = None
        logger.info(
            "New game %s: %s -> %s, %d shortest route(s)",
            puzzle.id, puzzle.start, puzzle.end, len(routes),
        )

    # =============================================================================
    # READ-ONLY STATE
    # =============================================================================

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    def status(self) -> GameStatus:
        return self._status

    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def last_guess(self) -> Optional[Guess]:
        return self._last_guess

    def all_valid_paths(self) -> List[List[str]]:
        """Every shortest route, as display names."""
        return [[self.graph.display_name(node) for node in route] for route in self._routes]

    def required_intermediates(self) -> List[str]:
        """Union of intermediates across all shortest routes, as display names."""
        return sorted(self.graph.display_name(node) for node in self._required)

    def _correct_nodes(self) -> Set[NodeName]:
        return {
            self.graph.normalize(guess.district)
            for guess in self._history
            if guess.tier == GuessTier.EXACT
        }

    def _prior_nodes(self) -> Set[NodeName]:
        # Invalid guesses do not claim a name
        return {
            self.graph.normalize(guess.district)
            for guess in self._history
            if guess.tier != GuessTier.INVALID
        }

    def _route_completed(self) -> bool:
        correct = self._correct_nodes()
        return any(intermediates <= correct for intermediates in self._route_intermediates)

    # =============================================================================
    # TRANSITIONS
    # =============================================================================

    def submit_guess(self, raw: str) -> Guess:
        """Evaluate and record a guess; every submission is kept in history."""
        guess = self.evaluator.evaluate(
            raw, self._puzzle, self._prior_nodes(), routes=list(self._routes)
        )
        self._history.append(guess)
        self._last_guess = guess

        if self._status != GameStatus.WON and self._route_completed():
            self._status = GameStatus.WON
            logger.info("Game %s won after %d guess(es)", self._puzzle.id, len(self._history))
        return guess

    def undo(self) -> bool:
        """Drop the most recent guess. Returns False when there is nothing to undo."""
        if not self._history:
            return False

        self._history.pop()
        self._last_guess = None
        completed = bool(self._history) and self._route_completed()
        self._status = GameStatus.WON if completed else GameStatus.PLAYING
        return True

    def hint(self) -> Optional[str]:
        """First intermediate of the canonical route not yet guessed exactly."""
        correct = self._correct_nodes()
        for district in self._puzzle.intermediates:
            if self.graph.normalize(district) not in correct:
                return self.graph.display_name(district)
        return None

    def new_game(self, puzzle: Puzzle) -> None:
        """Start over on another puzzle; nothing carries across."""
        self._load(puzzle)

    def progress(self) -> GameProgress:
        """
        Counts of correct and incorrect guesses against the required set.

        The percentage is taken over the union of intermediates of every
        shortest route, so a puzzle with alternate routes can be won below
        100%. Duplicates are not counted as incorrect. A puzzle with no
        intermediates reports 100%.
        """
        correct = sum(1 for guess in self._history if guess.is_correct)
        incorrect = sum(
            1
            for guess in self._history
            if not guess.is_correct and guess.tier != GuessTier.DUPLICATE
        )
        total = len(self._required)
        percentage = 100.0 if total == 0 else min(100.0, correct / total * 100)
        return GameProgress(
            total_required=total,
            correct_guesses=correct,
            incorrect_guesses=incorrect,
            completion_percentage=percentage,
        )
