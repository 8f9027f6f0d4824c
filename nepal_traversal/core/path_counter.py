"""
Route counting using the adjacency matrix method.

Entry (i, j) of A^k counts the walks of k edges from node i to node j. At
the smallest k where that entry is non-zero every such walk is a shortest
route, so the entry is the number of shortest routes. This gives an
independent check on the breadth-first enumeration in ``PathFinder``.
"""

from typing import Dict, Set, Tuple

import numpy as np

from nepal_traversal.types import Graph, NodeName, RouteCount


def _build_adjacency_matrix(graph: Graph) -> Tuple[np.ndarray, Dict[NodeName, int]]:
    """
    Build adjacency matrix and node index mapping from graph.

    Neighbours that are not themselves nodes are skipped; validation
    reports them separately.
    """
    nodes = sorted(graph.keys())
    n = len(nodes)
    node_to_idx = {node: i for i, node in enumerate(nodes)}

    matrix = np.zeros((n, n), dtype=np.int64)
    for i, node in enumerate(nodes):
        for next_node in graph[node]:
            if next_node in node_to_idx:
                matrix[i, node_to_idx[next_node]] = 1

    return matrix, node_to_idx


def count_shortest_routes(graph: Graph, start: NodeName, end: NodeName) -> RouteCount:
    """
    Count shortest routes between two nodes.

    Raises ValueError for nodes that are not in the graph.
    """
    matrix, node_to_idx = _build_adjacency_matrix(graph)

    if start not in node_to_idx:
        raise ValueError(f"Start node '{start}' not in graph")
    if end not in node_to_idx:
        raise ValueError(f"End node '{end}' not in graph")

    source_idx = node_to_idx[start]
    target_idx = node_to_idx[end]
    if source_idx == target_idx:
        return RouteCount(length=0, count=1)

    # A simple route never has more than n - 1 edges
    current_power = np.eye(len(matrix), dtype=np.int64)
    for length in range(1, len(matrix)):
        current_power = current_power @ matrix
        count = int(current_power[source_idx, target_idx])
        if count > 0:
            return RouteCount(length=length, count=count)

    return RouteCount(length=None, count=0)


def reachable_within(graph: Graph, start_node: NodeName, max_steps: int) -> Set[NodeName]:
    """
    Find all nodes reachable from start_node within max_steps.

    Used by the configuration check to spot disconnected districts.
    """
    matrix, node_to_idx = _build_adjacency_matrix(graph)
    if start_node not in node_to_idx:
        raise ValueError(f"Node '{start_node}' not in graph")
    start_idx = node_to_idx[start_node]

    # Accumulate boolean powers of the adjacency matrix
    reachability = np.eye(len(matrix), dtype=bool)
    current = np.eye(len(matrix), dtype=bool)

    for _ in range(max_steps):
        current = (current.astype(np.int64) @ matrix).astype(bool)
        new_reach = reachability | current
        if np.array_equal(new_reach, reachability):
            break
        reachability = new_reach

    idx_to_node = {v: k for k, v in node_to_idx.items()}
    reachable_indices = np.where(reachability[start_idx])[0]

    return {idx_to_node[idx] for idx in reachable_indices}
