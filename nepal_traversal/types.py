from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Union


# Type aliases for clarity
NodeName = str
Path = List[NodeName]
Graph = Dict[NodeName, Sequence[NodeName]]
Distance = Union[int, float]  # float only for math.inf


class Difficulty(str, Enum):
    """Named intermediate-count bands used by the puzzle generator."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    ANY = "any"  # caller supplies the bounds


class GuessTier(str, Enum):
    """Feedback classification of a single guess."""

    EXACT = "exact"          # intermediate of some shortest route
    NEAR = "near"            # one district away from a route
    MEDIUM = "medium"        # two districts away
    FAR = "far"              # further than two, or beyond the search depth
    INVALID = "invalid"      # unknown district or an endpoint
    DUPLICATE = "duplicate"  # already guessed


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"


class RouteCount(NamedTuple):
    """Result of shortest-route counting."""

    length: Optional[int]  # in edges, None when unreachable
    count: int
