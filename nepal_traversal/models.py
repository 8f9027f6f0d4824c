import math
import time
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nepal_traversal.types import Difficulty, GuessTier
from nepal_traversal.utils import compact_key


class Puzzle(BaseModel):
    """
    A start/end pair and one shortest route between them.

    District names are display forms. Structural invariants are checked
    here without a graph, so names are compared by spelling (case, spaces
    and punctuation ignored) and an alias never matches its district:
    start="Kavre" does not agree with a path beginning "Kavrepalanchok".
    Build puzzles from aliases with ``PuzzleGenerator.build_puzzle``.
    Agreement with the adjacency graph is checked by
    ``PuzzleGenerator.validate_puzzle``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    start: str = Field(min_length=1)
    end: str = Field(min_length=1)
    shortest_path: Tuple[str, ...]
    difficulty: Optional[Difficulty] = None

    @field_validator("id", "start", "end")
    @classmethod
    def strip_names(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def check_path(self) -> "Puzzle":
        path_keys = [compact_key(district) for district in self.shortest_path]
        start_key = compact_key(self.start)
        end_key = compact_key(self.end)

        if start_key == end_key:
            raise ValueError("Start and end districts cannot be the same")
        if len(path_keys) < 2:
            raise ValueError("Shortest path must have at least 2 districts")
        if path_keys[0] != start_key:
            raise ValueError("Shortest path must start with the start district")
        if path_keys[-1] != end_key:
            raise ValueError("Shortest path must end with the end district")
        if len(set(path_keys)) != len(path_keys):
            raise ValueError("Shortest path cannot contain duplicate districts")
        return self

    @property
    def intermediates(self) -> List[str]:
        return list(self.shortest_path[1:-1])

    @property
    def intermediate_count(self) -> int:
        return len(self.shortest_path) - 2


class Guess(BaseModel):
    """One submitted guess and its classification."""

    model_config = ConfigDict(frozen=True)

    district: str
    is_correct: bool
    tier: GuessTier
    timestamp: float = Field(default_factory=time.time)
    distance_from_path: Union[int, float] = math.inf
    path_position: Optional[int] = None  # 1-based index among intermediates, exact guesses only

    @model_validator(mode="after")
    def check_consistency(self) -> "Guess":
        if self.is_correct != (self.tier == GuessTier.EXACT):
            raise ValueError("is_correct must be set exactly for exact guesses")
        if self.distance_from_path < 0:
            raise ValueError("distance_from_path cannot be negative")
        return self


class GameProgress(BaseModel):
    """Summary of a session's progress toward the win condition."""

    model_config = ConfigDict(frozen=True)

    total_required: int
    correct_guesses: int
    incorrect_guesses: int
    completion_percentage: float
