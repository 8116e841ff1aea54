"""Structural inspection of a proximity graph.

Edges are directed as stored: node A lists B. Insertion adds both
directions, but FIFO trimming later removes one side only, so these
helpers report what is actually in the neighbor lists rather than
assuming symmetry.
"""

from typing import Dict, Iterable, List, Set, Tuple
from collections import deque

from smallworld.graph.graph import ProximityGraph


# Type alias for a directed edge (from_id, to_id)
EdgeId = Tuple[int, int]


def degree_statistics(graph: ProximityGraph) -> Dict[str, float]:
    """Compute out-degree statistics over all nodes.

    Args:
        graph: Graph to inspect

    Returns:
        Dictionary with node_count, edge_count (directed), avg_degree,
        min_degree and max_degree
    """
    if graph.size() == 0:
        return {
            "node_count": 0,
            "edge_count": 0,
            "avg_degree": 0.0,
            "min_degree": 0,
            "max_degree": 0,
        }

    degrees = [len(node.neighbors) for node in graph.nodes.values()]

    return {
        "node_count": len(degrees),
        "edge_count": sum(degrees),
        "avg_degree": sum(degrees) / len(degrees),
        "min_degree": min(degrees),
        "max_degree": max(degrees),
    }


def find_asymmetric_edges(graph: ProximityGraph) -> List[EdgeId]:
    """List edges whose reverse edge is missing.

    Args:
        graph: Graph to inspect

    Returns:
        (a, b) pairs where a lists b but b does not list a, in node order
    """
    asymmetric: List[EdgeId] = []
    for node_id, node in graph.nodes.items():
        for neighbor_id in node.neighbors:
            if node_id not in graph.nodes[neighbor_id].neighbors:
                asymmetric.append((node_id, neighbor_id))

    return asymmetric


def reachable_from(graph: ProximityGraph, start_ids: Iterable[int]) -> Set[int]:
    """Collect every node reachable by following neighbor lists.

    This is the set a search seeded at start_ids could visit if its
    candidate queue were never capped.

    Args:
        graph: Graph to traverse
        start_ids: Node IDs to start from

    Returns:
        Set of reachable node IDs, including the start nodes
    """
    visited: Set[int] = set()
    queue: deque = deque()

    for node_id in start_ids:
        if node_id in graph.nodes and node_id not in visited:
            visited.add(node_id)
            queue.append(node_id)

    while queue:
        current = queue.popleft()
        for neighbor in graph.nodes[current].neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return visited
