"""
AdjacencyGraph - immutable district graph with name normalisation.

The graph is built once from the static table in ``nepal_traversal.data``
and shared read-only by every puzzle and session. Validation never
repairs the table: it reports every defect so the data can be curated.
"""

import logging
from collections import Counter
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from nepal_traversal.constants import SUGGESTION_LIMIT, SUGGESTION_MIN_CHARS
from nepal_traversal.core.path_counter import reachable_within
from nepal_traversal.data.districts import DISPLAY_NAMES, DISTRICT_ADJACENCY, DISTRICT_ALIASES
from nepal_traversal.errors import ConfigurationDefect, GraphConfigurationError
from nepal_traversal.types import NodeName
from nepal_traversal.utils import compact_key

logger = logging.getLogger(__name__)


class AdjacencyGraph:
    """
    Static undirected graph of named districts.

    Responsibilities:
        - Ordered neighbour lookup (order is the BFS tie-break)
        - Mapping free-form names onto canonical node keys
        - Mapping node keys onto display names
        - Reporting configuration defects

    Attributes:
        adjacency: node -> tuple of neighbours, read-only
        aliases: compact alias -> node, read-only
    """

    def __init__(
        self,
        adjacency: Mapping[NodeName, Sequence[NodeName]],
        aliases: Optional[Mapping[str, NodeName]] = None,
        display_names: Optional[Mapping[NodeName, str]] = None,
    ):
        self.adjacency: Mapping[NodeName, Tuple[NodeName, ...]] = MappingProxyType(
            {node: tuple(neighbors) for node, neighbors in adjacency.items()}
        )
        self.aliases: Mapping[str, NodeName] = MappingProxyType(dict(aliases or {}))

        display_names = display_names or {}
        self._display: Dict[NodeName, str] = {
            node: display_names.get(node, node.capitalize()) for node in self.adjacency
        }
        self._by_compact: Dict[str, NodeName] = {
            compact_key(node): node for node in self.adjacency
        }

        # Reverse edges, so searches stay correct on a defective one-way table
        predecessors: Dict[NodeName, List[NodeName]] = {}
        for node, neighbors in self.adjacency.items():
            for neighbor in neighbors:
                predecessors.setdefault(neighbor, []).append(node)
        self._predecessors: Dict[NodeName, Tuple[NodeName, ...]] = {
            node: tuple(sources) for node, sources in predecessors.items()
        }

    # =============================================================================
    # LOOKUPS
    # =============================================================================

    def __contains__(self, node) -> bool:
        return node in self.adjacency

    def __iter__(self) -> Iterator[NodeName]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    @property
    def nodes(self) -> List[NodeName]:
        return list(self.adjacency)

    def neighbors(self, node: NodeName) -> Tuple[NodeName, ...]:
        """Ordered neighbours of a node; empty for unknown nodes."""
        return self.adjacency.get(node, ())

    def predecessors(self, node: NodeName) -> Tuple[NodeName, ...]:
        """Nodes that list node as a neighbour, in table order."""
        return self._predecessors.get(node, ())

    def has_edge(self, a: NodeName, b: NodeName) -> bool:
        return b in self.adjacency.get(a, ())

    def normalize(self, raw) -> Optional[NodeName]:
        """
        Map free-form text onto a node key.

        Case, whitespace and punctuation are ignored, then the alias table
        is consulted. Returns None for anything unrecognised, including
        non-string input.
        """
        key = compact_key(raw)
        if not key:
            return None
        if key in self._by_compact:
            return self._by_compact[key]
        alias_target = self.aliases.get(key)
        if alias_target in self.adjacency:
            return alias_target
        return None

    def display_name(self, node: NodeName) -> str:
        """Display form of a node key (or of any name that normalises to one)."""
        if node in self._display:
            return self._display[node]
        resolved = self.normalize(node)
        if resolved is None:
            raise KeyError(f"Unknown district '{node}'")
        return self._display[resolved]

    def suggest(self, raw, limit: int = SUGGESTION_LIMIT) -> List[str]:
        """
        Display names whose key contains the given text, for autocomplete.

        An exact alias hit is included as well. Inputs shorter than the
        minimum length yield no suggestions.
        """
        query = compact_key(raw)
        if len(query) < SUGGESTION_MIN_CHARS:
            return []

        matches = {node for node in self.adjacency if query in node}
        alias_target = self.aliases.get(query)
        if alias_target in self.adjacency:
            matches.add(alias_target)

        return sorted(self._display[node] for node in matches)[:limit]

    # =============================================================================
    # VALIDATION
    # =============================================================================

    def validate(self) -> List[ConfigurationDefect]:
        """
        Check the whole table and return every defect found.

        Checks: empty neighbour lists, self loops, repeated neighbours,
        neighbours that are not districts, missing reverse edges, aliases
        pointing nowhere, and districts unreachable from the first one.
        """
        defects: List[ConfigurationDefect] = []

        for node, neighbors in self.adjacency.items():
            if not neighbors:
                defects.append(ConfigurationDefect("empty", node))
                continue

            for neighbor, count in Counter(neighbors).items():
                if count > 1:
                    defects.append(ConfigurationDefect("duplicate", node, neighbor))

            for neighbor in dict.fromkeys(neighbors):
                if neighbor == node:
                    defects.append(ConfigurationDefect("self_loop", node, neighbor))
                elif neighbor not in self.adjacency:
                    defects.append(ConfigurationDefect("unknown_neighbor", node, neighbor))
                elif node not in self.adjacency[neighbor]:
                    defects.append(ConfigurationDefect("asymmetric", node, neighbor))

        for alias, target in self.aliases.items():
            if target not in self.adjacency:
                defects.append(ConfigurationDefect("unknown_alias", alias, target))

        if self.adjacency:
            origin = next(iter(self.adjacency))
            reachable = reachable_within(self.adjacency, origin, len(self.adjacency))
            for node in self.adjacency:
                if node not in reachable:
                    defects.append(ConfigurationDefect("unreachable", node, origin))

        for defect in defects:
            logger.warning("Adjacency defect: %s", defect)
        return defects

    def ensure_valid(self) -> "AdjacencyGraph":
        """Raise GraphConfigurationError listing every defect, or return self."""
        defects = self.validate()
        if defects:
            raise GraphConfigurationError(defects)
        logger.info("Adjacency table valid: %d districts", len(self))
        return self


@lru_cache(maxsize=1)
def get_district_graph() -> AdjacencyGraph:
    """The process-wide Nepal district graph (built once, never mutated)."""
    return AdjacencyGraph(DISTRICT_ADJACENCY, DISTRICT_ALIASES, DISPLAY_NAMES)
