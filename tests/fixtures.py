"""
Small graphs and puzzles shared by the test modules.

The scenario graph is a five-edge corner of the Kathmandu valley with one
shortest route from Kathmandu to Chitwan.
"""

from nepal_traversal.core import AdjacencyGraph
from nepal_traversal.models import Puzzle

SCENARIO_EDGES = [
    ("kathmandu", "lalitpur"),
    ("kathmandu", "bhaktapur"),
    ("lalitpur", "bhaktapur"),
    ("lalitpur", "makwanpur"),
    ("makwanpur", "chitwan"),
]

# Two equally short routes A -> B -> D and A -> C -> D, plus a detour via E
DIAMOND_EDGES = [
    ("a", "b"),
    ("a", "c"),
    ("b", "d"),
    ("c", "d"),
    ("c", "e"),
    ("e", "f"),
]


def adjacency_from_edges(edges):
    adjacency = {}
    for a, b in edges:
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    return adjacency


def scenario_graph() -> AdjacencyGraph:
    return AdjacencyGraph(adjacency_from_edges(SCENARIO_EDGES), aliases={"patan": "lalitpur"})


def scenario_puzzle() -> Puzzle:
    return Puzzle(
        id="scenario",
        start="Kathmandu",
        end="Chitwan",
        shortest_path=("Kathmandu", "Lalitpur", "Makwanpur", "Chitwan"),
    )


def diamond_graph() -> AdjacencyGraph:
    return AdjacencyGraph(adjacency_from_edges(DIAMOND_EDGES))


def diamond_puzzle() -> Puzzle:
    return Puzzle(id="diamond", start="A", end="D", shortest_path=("A", "B", "D"))
