"""Structural invariants enforced when models are constructed."""

import math

import pytest
from pydantic import ValidationError

from nepal_traversal.models import GameProgress, Guess, Puzzle
from nepal_traversal.types import Difficulty, GuessTier


def make_puzzle(**overrides):
    fields = dict(
        id="p1",
        start="Kathmandu",
        end="Chitwan",
        shortest_path=("Kathmandu", "Lalitpur", "Makwanpur", "Chitwan"),
    )
    fields.update(overrides)
    return Puzzle(**fields)


class TestPuzzle:
    def test_valid_puzzle(self):
        puzzle = make_puzzle(difficulty="medium")
        assert puzzle.intermediates == ["Lalitpur", "Makwanpur"]
        assert puzzle.intermediate_count == 2
        assert puzzle.difficulty == Difficulty.MEDIUM

    def test_names_are_stripped(self):
        assert make_puzzle(start=" Kathmandu ").start == "Kathmandu"

    def test_endpoint_comparison_ignores_case(self):
        puzzle = make_puzzle(start="kathmandu", end="CHITWAN")
        assert puzzle.intermediate_count == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(end="Kathmandu", shortest_path=("Kathmandu", "Kathmandu")),
            dict(shortest_path=("Kathmandu",)),
            dict(shortest_path=("Lalitpur", "Makwanpur", "Chitwan")),
            dict(shortest_path=("Kathmandu", "Lalitpur", "Makwanpur")),
            dict(shortest_path=("Kathmandu", "Lalitpur", "lalitpur", "Chitwan")),
            dict(id="   "),
            dict(start=""),
        ],
    )
    def test_structural_violations_rejected(self, overrides):
        with pytest.raises(ValidationError):
            make_puzzle(**overrides)

    def test_spelling_variants_agree(self):
        puzzle = make_puzzle(start="Rukum-West", end="Dolpa", shortest_path=("rukum west", "Dolpa"))
        assert puzzle.start == "Rukum-West"

    def test_alias_endpoint_does_not_match_district(self):
        with pytest.raises(ValidationError):
            make_puzzle(start="Kavre", end="Bhaktapur", shortest_path=("Kavrepalanchok", "Bhaktapur"))

    def test_frozen(self):
        puzzle = make_puzzle()
        with pytest.raises(ValidationError):
            puzzle.start = "Lalitpur"

    def test_json_round_trip(self):
        puzzle = make_puzzle(difficulty=Difficulty.EASY)
        data = puzzle.model_dump(mode="json")
        assert data["shortest_path"] == ["Kathmandu", "Lalitpur", "Makwanpur", "Chitwan"]
        assert data["difficulty"] == "easy"
        assert Puzzle.model_validate(data) == puzzle


class TestGuess:
    def test_defaults(self):
        guess = Guess(district="Atlantis", is_correct=False, tier=GuessTier.INVALID)
        assert guess.distance_from_path == math.inf
        assert guess.path_position is None
        assert guess.timestamp > 0

    def test_correctness_must_match_tier(self):
        with pytest.raises(ValidationError):
            Guess(district="Lalitpur", is_correct=True, tier=GuessTier.NEAR)
        with pytest.raises(ValidationError):
            Guess(district="Lalitpur", is_correct=False, tier=GuessTier.EXACT)

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            Guess(district="Lalitpur", is_correct=False, tier=GuessTier.NEAR, distance_from_path=-1)


def test_game_progress_fields():
    progress = GameProgress(
        total_required=4, correct_guesses=1, incorrect_guesses=3, completion_percentage=25.0
    )
    assert progress.completion_percentage == 25.0
