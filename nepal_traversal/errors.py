"""
Error types for the traversal engine.

Unknown guess text is not an error: it is reported as the ``invalid`` tier.
Generation exhaustion is not an error either: the generator returns None.
"""

from typing import List, NamedTuple, Optional


class ConfigurationDefect(NamedTuple):
    """One problem found in the adjacency table."""

    kind: str  # asymmetric, unknown_neighbor, unknown_alias, empty, self_loop, duplicate, unreachable
    node: str
    neighbor: Optional[str] = None

    def __str__(self):
        if self.kind == "asymmetric":
            return f"{self.node} lists {self.neighbor} but {self.neighbor} does not list {self.node}"
        if self.kind == "unknown_neighbor":
            return f"{self.node} lists unknown district {self.neighbor}"
        if self.kind == "empty":
            return f"{self.node} has no neighbours"
        if self.kind == "self_loop":
            return f"{self.node} lists itself as a neighbour"
        if self.kind == "duplicate":
            return f"{self.node} lists {self.neighbor} more than once"
        if self.kind == "unknown_alias":
            return f"alias {self.node} points at unknown district {self.neighbor}"
        if self.kind == "unreachable":
            return f"{self.node} is not reachable from {self.neighbor}"
        return f"{self.kind}: {self.node}"


class GraphConfigurationError(Exception):
    """Raised when the adjacency table fails validation."""

    def __init__(self, defects: List[ConfigurationDefect]):
        self.defects = list(defects)
        summary = "; ".join(str(defect) for defect in self.defects)
        super().__init__(
            f"Adjacency table has {len(self.defects)} defect(s): {summary}"
        )


class InvalidPuzzleError(ValueError):
    """Raised when a puzzle contradicts the adjacency graph."""

    def __init__(self, puzzle_id: str, problems: List[str]):
        self.puzzle_id = puzzle_id
        self.problems = list(problems)
        super().__init__(f"Puzzle '{puzzle_id}' is invalid: {'; '.join(self.problems)}")
