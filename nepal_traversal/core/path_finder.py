"""
Breadth-first route search over the district graph.

All three queries expand neighbours in adjacency-list order, so results are
deterministic for a fixed table. Route length is counted in nodes when a
route is returned and in edges when a distance is returned.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from nepal_traversal.core.adjacency_graph import AdjacencyGraph
from nepal_traversal.types import NodeName, Path

logger = logging.getLogger(__name__)

PairKey = Tuple[NodeName, NodeName]


class PathCache:
    """
    Memoisation for route queries, keyed by (start, end) node pair.

    The graph never changes, so entries never go stale; clearing only
    costs recomputation.
    """

    def __init__(self):
        self.shortest: Dict[PairKey, Optional[Tuple[NodeName, ...]]] = {}
        self.all_shortest: Dict[PairKey, Tuple[Tuple[NodeName, ...], ...]] = {}
        self.distances: Dict[NodeName, Dict[NodeName, int]] = {}

    def __len__(self) -> int:
        return len(self.shortest) + len(self.all_shortest) + len(self.distances)

    def clear(self) -> None:
        self.shortest.clear()
        self.all_shortest.clear()
        self.distances.clear()


class PathFinder:
    """Shortest-route queries over an AdjacencyGraph."""

    def __init__(self, graph: AdjacencyGraph, cache: Optional[PathCache] = None):
        self.graph = graph
        self.cache = cache

    def _resolve(self, name) -> Optional[NodeName]:
        if name in self.graph:
            return name
        return self.graph.normalize(name)

    # =============================================================================
    # SINGLE SHORTEST ROUTE
    # =============================================================================

    def shortest_path(self, start, end) -> Optional[Path]:
        """
        The canonical preferred route from start to end.

        Plain BFS with global visitation; the first route that reaches end
        wins. Returns [start] when start == end and None when either name
        is unknown or end is unreachable.
        """
        s = self._resolve(start)
        e = self._resolve(end)
        if s is None or e is None:
            return None

        key = (s, e)
        if self.cache is not None and key in self.cache.shortest:
            cached = self.cache.shortest[key]
            return list(cached) if cached is not None else None

        path = self._compute_shortest(s, e)
        if self.cache is not None:
            self.cache.shortest[key] = tuple(path) if path is not None else None
        return path

    def _compute_shortest(self, start: NodeName, end: NodeName) -> Optional[Path]:
        if start == end:
            return [start]

        queue = deque([[start]])
        visited = {start}

        while queue:
            path = queue.popleft()
            for neighbor in self.graph.neighbors(path[-1]):
                if neighbor in visited:
                    continue
                new_path = path + [neighbor]
                if neighbor == end:
                    return new_path
                visited.add(neighbor)
                queue.append(new_path)

        return None

    # =============================================================================
    # EVERY SHORTEST ROUTE
    # =============================================================================

    def all_shortest_paths(self, start, end) -> List[Path]:
        """
        Every route of minimum length from start to end, in BFS order.

        Visitation is tracked per route, not globally, so routes that share
        districts are all kept. A branch is only extended while it can still
        reach end within the established minimum length; the search stops as
        soon as the queue head is longer than that minimum.
        """
        s = self._resolve(start)
        e = self._resolve(end)
        if s is None or e is None:
            return []

        key = (s, e)
        if self.cache is not None and key in self.cache.all_shortest:
            return [list(path) for path in self.cache.all_shortest[key]]

        paths = self._compute_all_shortest(s, e)
        logger.debug("%d shortest route(s) %s -> %s", len(paths), s, e)
        if self.cache is not None:
            self.cache.all_shortest[key] = tuple(tuple(path) for path in paths)
        return paths

    def _compute_all_shortest(self, start: NodeName, end: NodeName) -> List[Path]:
        if start == end:
            return [[start]]

        to_end = self._distances_to(end)
        if start not in to_end:
            return []
        shortest_length = to_end[start] + 1  # in nodes

        result: List[Path] = []
        queue = deque([[start]])

        while queue and len(queue[0]) <= shortest_length:
            path = queue.popleft()
            current = path[-1]

            if current == end:
                result.append(path)
                continue

            for neighbor in self.graph.neighbors(current):
                if neighbor in path:
                    continue
                # Length bound: the branch must still fit within the minimum
                remaining = to_end.get(neighbor)
                if remaining is None or len(path) + 1 + remaining > shortest_length:
                    continue
                queue.append(path + [neighbor])

        return result

    # =============================================================================
    # DISTANCES
    # =============================================================================

    def bounded_distance(self, start, end, max_depth: Optional[int] = None) -> int:
        """
        Hop count from start to end, searching at most max_depth hops.

        Returns max_depth + 1 when end is not found within the bound (or
        either name is unknown). With no bound, the district count is used,
        which no simple route can exceed.
        """
        if max_depth is None:
            max_depth = len(self.graph)
        if max_depth < 0:
            raise ValueError("max_depth cannot be negative")

        s = self._resolve(start)
        e = self._resolve(end)
        if s is None or e is None:
            return max_depth + 1
        if s == e:
            return 0

        queue = deque([(s, 0)])
        visited = {s}

        while queue:
            current, distance = queue.popleft()
            if distance >= max_depth:
                continue
            for neighbor in self.graph.neighbors(current):
                if neighbor in visited:
                    continue
                if neighbor == e:
                    return distance + 1
                visited.add(neighbor)
                queue.append((neighbor, distance + 1))

        return max_depth + 1

    def _distances_to(self, target: NodeName) -> Dict[NodeName, int]:
        """
        Hop count from every node that can reach target.

        Walks edges backwards, so one-way entries in a defective table are
        measured in the direction routes actually travel them.
        """
        if self.cache is not None and target in self.cache.distances:
            return self.cache.distances[target]

        distances = {target: 0}
        queue = deque([target])
        while queue:
            current = queue.popleft()
            for source in self.graph.predecessors(current):
                if source not in distances:
                    distances[source] = distances[current] + 1
                    queue.append(source)

        if self.cache is not None:
            self.cache.distances[target] = distances
        return distances
