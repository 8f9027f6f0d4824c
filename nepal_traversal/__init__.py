"""
Nepal Traversal - district path-finding puzzle engine.

Name every district on a shortest route between two districts of Nepal.
"""

from .types import Difficulty, GameStatus, GuessTier
from .models import GameProgress, Guess, Puzzle
from .errors import ConfigurationDefect, GraphConfigurationError, InvalidPuzzleError
from .core import (
    FALLBACK_PUZZLES,
    AdjacencyGraph,
    GameSession,
    GuessEvaluator,
    PathCache,
    PathFinder,
    PuzzleGenerator,
    daily_puzzle,
    get_district_graph,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "Difficulty",
    "GameStatus",
    "GuessTier",
    # Models
    "GameProgress",
    "Guess",
    "Puzzle",
    # Errors
    "ConfigurationDefect",
    "GraphConfigurationError",
    "InvalidPuzzleError",
    # Engine
    "AdjacencyGraph",
    "get_district_graph",
    "PathCache",
    "PathFinder",
    "PuzzleGenerator",
    "FALLBACK_PUZZLES",
    "daily_puzzle",
    "GuessEvaluator",
    "GameSession",
]
