"""Tests for the GameSession state machine."""

import unittest

import pytest
from hypothesis import given, settings, strategies as st

from nepal_traversal.core import (
    FALLBACK_PUZZLES,
    AdjacencyGraph,
    GameSession,
    PathFinder,
    get_district_graph,
)
from nepal_traversal.config import EngineSettings
from nepal_traversal.errors import InvalidPuzzleError
from nepal_traversal.models import Puzzle
from nepal_traversal.types import GameStatus, GuessTier
from tests.fixtures import diamond_graph, diamond_puzzle, scenario_graph, scenario_puzzle

GRAPH = get_district_graph()


class TestScenarioGame(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(scenario_puzzle(), scenario_graph())

    def test_initial_state(self):
        self.assertEqual(self.session.status(), GameStatus.PLAYING)
        self.assertEqual(self.session.history(), ())
        self.assertIsNone(self.session.last_guess)

    def test_win_by_naming_every_intermediate(self):
        self.assertEqual(self.session.submit_guess("lalitpur").tier, GuessTier.EXACT)
        self.assertEqual(self.session.status(), GameStatus.PLAYING)
        self.assertEqual(self.session.submit_guess("makwanpur").tier, GuessTier.EXACT)
        self.assertEqual(self.session.status(), GameStatus.WON)

    def test_second_identical_guess_is_duplicate(self):
        self.session.submit_guess("lalitpur")
        self.assertEqual(self.session.submit_guess("Lalitpur").tier, GuessTier.DUPLICATE)

    def test_every_submission_recorded(self):
        self.session.submit_guess("atlantis")
        self.session.submit_guess("bhaktapur")
        self.session.submit_guess("bhaktapur")
        self.session.submit_guess("kathmandu")

        tiers = [guess.tier for guess in self.session.history()]
        self.assertEqual(
            tiers, [GuessTier.INVALID, GuessTier.NEAR, GuessTier.DUPLICATE, GuessTier.INVALID]
        )
        self.assertEqual(self.session.last_guess.district, "Kathmandu")

    def test_endpoint_stays_invalid_after_repeat(self):
        self.session.submit_guess("chitwan")
        self.assertEqual(self.session.submit_guess("chitwan").tier, GuessTier.INVALID)

    def test_history_is_a_snapshot(self):
        self.session.submit_guess("lalitpur")
        snapshot = self.session.history()
        self.session.submit_guess("makwanpur")
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(self.session.history()), 2)

    def test_won_is_sticky(self):
        self.session.submit_guess("lalitpur")
        self.session.submit_guess("makwanpur")
        self.session.submit_guess("atlantis")
        self.session.submit_guess("lalitpur")
        self.assertEqual(self.session.status(), GameStatus.WON)


class TestUndo(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(scenario_puzzle(), scenario_graph())

    def test_undo_on_empty_history(self):
        self.assertFalse(self.session.undo())
        self.assertEqual(self.session.status(), GameStatus.PLAYING)

    def test_undo_reverts_win(self):
        self.session.submit_guess("lalitpur")
        self.session.submit_guess("makwanpur")
        self.assertTrue(self.session.undo())
        self.assertEqual(self.session.status(), GameStatus.PLAYING)
        self.assertEqual(len(self.session.history()), 1)
        self.assertIsNone(self.session.last_guess)

    def test_undo_keeps_win_when_still_complete(self):
        self.session.submit_guess("lalitpur")
        self.session.submit_guess("makwanpur")
        self.session.submit_guess("bhaktapur")
        self.assertTrue(self.session.undo())
        self.assertEqual(self.session.status(), GameStatus.WON)

    def test_undone_guess_can_be_guessed_again(self):
        self.session.submit_guess("lalitpur")
        self.session.undo()
        self.assertEqual(self.session.submit_guess("lalitpur").tier, GuessTier.EXACT)


class TestHint(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(scenario_puzzle(), scenario_graph())

    def test_hint_follows_canonical_order(self):
        self.assertEqual(self.session.hint(), "Lalitpur")
        self.session.submit_guess("lalitpur")
        self.assertEqual(self.session.hint(), "Makwanpur")

    def test_hint_skips_found_districts(self):
        self.session.submit_guess("makwanpur")
        self.assertEqual(self.session.hint(), "Lalitpur")

    def test_no_hint_when_all_found(self):
        self.session.submit_guess("lalitpur")
        self.session.submit_guess("makwanpur")
        self.assertIsNone(self.session.hint())

    def test_hint_is_read_only(self):
        self.session.hint()
        self.assertEqual(self.session.history(), ())
        self.assertEqual(self.session.progress().correct_guesses, 0)


class TestAlternateRoutes:
    def test_win_on_non_canonical_route(self):
        session = GameSession(diamond_puzzle(), diamond_graph())
        assert session.submit_guess("c").tier == GuessTier.EXACT
        assert session.status() == GameStatus.WON

    def test_all_valid_paths_and_required(self):
        session = GameSession(diamond_puzzle(), diamond_graph())
        assert session.all_valid_paths() == [["A", "B", "D"], ["A", "C", "D"]]
        assert session.required_intermediates() == ["B", "C"]

    def test_real_graph_alternate_route(self):
        puzzle = Puzzle(
            id="valley",
            start="Bhaktapur",
            end="Makwanpur",
            shortest_path=("Bhaktapur", "Kathmandu", "Makwanpur"),
        )
        session = GameSession(puzzle, GRAPH)
        session.submit_guess("Patan")
        assert session.status() == GameStatus.WON
        assert session.hint() == "Kathmandu"


class TestNewGame:
    def test_nothing_carries_over(self):
        session = GameSession(scenario_puzzle(), scenario_graph())
        session.submit_guess("lalitpur")
        session.submit_guess("makwanpur")

        session.new_game(
            Puzzle(
                id="short",
                start="Bhaktapur",
                end="Makwanpur",
                shortest_path=("Bhaktapur", "Lalitpur", "Makwanpur"),
            )
        )

        assert session.puzzle.id == "short"
        assert session.status() == GameStatus.PLAYING
        assert session.history() == ()
        assert session.last_guess is None
        assert session.submit_guess("lalitpur").tier == GuessTier.EXACT
        assert session.status() == GameStatus.WON

    def test_invalid_new_game_keeps_current_game(self):
        session = GameSession(scenario_puzzle(), scenario_graph())
        session.submit_guess("lalitpur")
        bad = Puzzle(
            id="bad", start="Kathmandu", end="Chitwan", shortest_path=("Kathmandu", "Chitwan")
        )

        with pytest.raises(InvalidPuzzleError):
            session.new_game(bad)

        assert session.puzzle.id == "scenario"
        assert len(session.history()) == 1


class TestPuzzleRejection:
    def test_non_shortest_puzzle_rejected(self):
        puzzle = Puzzle(
            id="detour",
            start="Kathmandu",
            end="Makwanpur",
            shortest_path=("Kathmandu", "Bhaktapur", "Lalitpur", "Makwanpur"),
        )
        with pytest.raises(InvalidPuzzleError) as exc_info:
            GameSession(puzzle, scenario_graph())
        assert exc_info.value.puzzle_id == "detour"
        assert exc_info.value.problems

    def test_unknown_district_rejected(self):
        puzzle = Puzzle(id="x", start="Kathmandu", end="Atlantis", shortest_path=("Kathmandu", "Atlantis"))
        with pytest.raises(InvalidPuzzleError):
            GameSession(puzzle, scenario_graph())

    def test_puzzle_without_routes_rejected(self):
        class NoRoutes(PathFinder):
            def all_shortest_paths(self, start, end):
                return []

        graph = scenario_graph()
        with pytest.raises(InvalidPuzzleError) as exc_info:
            GameSession(scenario_puzzle(), graph, path_finder=NoRoutes(graph))
        assert exc_info.value.problems == ["No route from Kathmandu to Chitwan"]


class TestZeroIntermediates:
    def test_adjacent_endpoints_win_on_first_submission(self):
        puzzle = Puzzle(id="pair", start="Lalitpur", end="Makwanpur", shortest_path=("Lalitpur", "Makwanpur"))
        session = GameSession(puzzle, scenario_graph())
        assert session.status() == GameStatus.PLAYING
        assert session.progress().completion_percentage == 100.0

        session.submit_guess("atlantis")
        assert session.status() == GameStatus.WON

        session.undo()
        assert session.status() == GameStatus.PLAYING


class TestProgress(unittest.TestCase):
    def test_counts(self):
        session = GameSession(scenario_puzzle(), scenario_graph())
        session.submit_guess("lalitpur")
        session.submit_guess("lalitpur")
        session.submit_guess("bhaktapur")
        session.submit_guess("atlantis")

        progress = session.progress()
        self.assertEqual(progress.total_required, 2)
        self.assertEqual(progress.correct_guesses, 1)
        self.assertEqual(progress.incorrect_guesses, 2)
        self.assertEqual(progress.completion_percentage, 50.0)

    def test_complete(self):
        session = GameSession(scenario_puzzle(), scenario_graph())
        session.submit_guess("lalitpur")
        session.submit_guess("makwanpur")
        self.assertEqual(session.progress().completion_percentage, 100.0)


class TestSessionSharing:
    def test_shared_path_finder(self):
        finder = PathFinder(GRAPH)
        first = GameSession(FALLBACK_PUZZLES[0], GRAPH, path_finder=finder)
        second = GameSession(FALLBACK_PUZZLES[1], GRAPH, path_finder=finder)
        first.submit_guess("kathmandu")
        assert first.status() == GameStatus.WON
        assert second.status() == GameStatus.PLAYING


# =============================================================================
# WIN CONDITION PROPERTY
# =============================================================================


@given(
    puzzle=st.sampled_from(FALLBACK_PUZZLES),
    guesses=st.lists(st.sampled_from(sorted(GRAPH.nodes)), max_size=25),
)
@settings(max_examples=100, deadline=None)
def test_won_iff_some_route_fully_guessed(puzzle, guesses):
    session = GameSession(puzzle, GRAPH)
    for raw in guesses:
        session.submit_guess(raw)

    exact = {GRAPH.normalize(g.district) for g in session.history() if g.tier == GuessTier.EXACT}
    routes = PathFinder(GRAPH).all_shortest_paths(puzzle.start, puzzle.end)
    completed = any(set(route[1:-1]) <= exact for route in routes)

    assert (session.status() == GameStatus.WON) == completed
    assert len(session.history()) == len(guesses)


class TestFromSettings:
    def test_feedback_depth_from_settings(self):
        settings = EngineSettings(_env_file=None, FEEDBACK_MAX_DEPTH=2)
        session = GameSession.from_settings(FALLBACK_PUZZLES[0], settings)

        assert session.evaluator.max_depth == 2
        assert session.graph is GRAPH
        guess = session.submit_guess("Jhapa")
        assert guess.tier == GuessTier.FAR
        assert guess.distance_from_path == 3


class TestOneWayTable(unittest.TestCase):
    """A table with a one-way entry still yields a winnable game."""

    def setUp(self):
        graph = AdjacencyGraph({"a": ["b"], "b": ["c"], "c": ["b"]})
        puzzle = Puzzle(id="one-way", start="A", end="C", shortest_path=("A", "B", "C"))
        self.session = GameSession(puzzle, graph)

    def test_route_found(self):
        self.assertEqual(self.session.all_valid_paths(), [["A", "B", "C"]])
        self.assertEqual(self.session.required_intermediates(), ["B"])

    def test_on_route_guess_wins(self):
        guess = self.session.submit_guess("b")
        self.assertEqual(guess.tier, GuessTier.EXACT)
        self.assertEqual(self.session.status(), GameStatus.WON)


class TestProgressWithAlternateRoutes:
    def test_won_below_full_completion(self):
        session = GameSession(diamond_puzzle(), diamond_graph())
        session.submit_guess("b")

        progress = session.progress()
        assert session.status() == GameStatus.WON
        assert progress.total_required == 2
        assert progress.completion_percentage == 50.0
