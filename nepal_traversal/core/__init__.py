"""
Traversal engine core.

Graph, route search, puzzle generation, guess evaluation and the game
session state machine, leaves first.
"""
from .adjacency_graph import AdjacencyGraph, get_district_graph
from .path_finder import PathCache, PathFinder
from .path_counter import count_shortest_routes, reachable_within
from .puzzle_generator import (
    FALLBACK_PUZZLES,
    PuzzleGenerator,
    classify_difficulty,
    daily_puzzle,
    resolve_bounds,
)
from .guess_evaluator import GuessEvaluator
from .game_session import GameSession

__all__ = [
    'AdjacencyGraph', 'get_district_graph',
    'PathCache', 'PathFinder',
    'count_shortest_routes', 'reachable_within',
    'FALLBACK_PUZZLES', 'PuzzleGenerator', 'classify_difficulty', 'daily_puzzle', 'resolve_bounds',
    'GuessEvaluator',
    'GameSession',
]
