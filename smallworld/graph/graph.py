"""
Proximity graph data structures.

This module defines the core data structures for storing the graph:
- Node: A single inserted vector with its list of neighbor IDs
- ProximityGraph: Arena that owns every node, keyed by insertion-order ID

Edges are stored as integer IDs resolved through the graph, never as
references between node objects. Neighbor lists are ordered oldest-first
because trimming evicts from the front, regardless of distance. When a
node evicts a neighbor, the evicted node keeps its own edge back, so
one-directional edges can accumulate and are never cleaned up.
"""

from typing import Dict, List, Optional

import numpy as np
import numpy.typing as npt

Vector = npt.NDArray[np.float64]


def as_vector(vector) -> Vector:
    """
    Copy a sequence of numbers into a read-only 1D float array.

    Raises:
        ValueError: If the input is not one-dimensional
    """
    arr = np.array(vector, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D vector, got array with shape {arr.shape}")

    arr.setflags(write=False)
    return arr


class Node:
    """
    Represents a single vector in the proximity graph.

    The vector is immutable after creation. The neighbor list only changes
    as a side effect of insertions (this node's own, or a later node that
    selects it as a neighbor).
    """

    def __init__(self, node_id: int, vector: Vector, level: int) -> None:
        """
        Create a new node.

        Args:
            node_id: Insertion-order identifier
            vector: The vector data (copied into a read-only array)
            level: Random level, recorded for bookkeeping only
        """
        self.id = node_id
        self.vector = as_vector(vector)
        self.level = level

        # Oldest first; duplicates are not filtered
        self.neighbors: List[int] = []

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Node(id={self.id}, level={self.level}, dim={len(self.vector)}, "
            f"neighbors={len(self.neighbors)})"
        )


class ProximityGraph:
    """
    Container for every node of the index.

    Node IDs are dense: after N insertions they are exactly 0..N-1.
    """

    def __init__(self, m: int = 8) -> None:
        """
        Initialize an empty graph.

        Args:
            m: Maximum neighbor-list length kept after trimming
        """
        if not isinstance(m, (int, np.integer)) or isinstance(m, bool) or m < 1:
            raise ValueError(f"m must be a positive integer, got {m}")

        self.m = m
        self.nodes: Dict[int, Node] = {}

        # Highest level drawn so far; never decreases
        self.max_level = 0

    def add_node(self, vector: Vector, level: int) -> int:
        """
        Store a new, unconnected node.

        Dimensionality is not checked here; a mismatch only surfaces once a
        distance involving this vector is computed.

        Args:
            vector: Vector data for the node
            level: Level drawn for this node

        Returns:
            The ID assigned to the new node (the previous node count)
        """
        node_id = len(self.nodes)
        self.nodes[node_id] = Node(node_id, vector, level)

        if level > self.max_level:
            self.max_level = level

        return node_id

    def get_node(self, node_id: int) -> Optional[Node]:
        """
        Retrieve a node by its ID.

        Returns:
            The Node, or None if not found
        """
        return self.nodes.get(node_id)

    def set_neighbors(self, node_id: int, neighbor_ids: List[int]) -> None:
        """Replace a node's neighbor list."""
        self.nodes[node_id].neighbors = list(neighbor_ids)

    def append_neighbor(self, node_id: int, neighbor_id: int) -> Optional[int]:
        """
        Append a neighbor and trim the list back to m if it overflows.

        Trimming removes the single oldest entry, which may be an edge closer
        than the one just added. The reverse edge held by the evicted node is
        left in place.

        Args:
            node_id: Node whose list grows
            neighbor_id: ID to append

        Returns:
            The evicted neighbor ID, or None if nothing was trimmed
        """
        neighbors = self.nodes[node_id].neighbors
        neighbors.append(neighbor_id)

        if len(neighbors) > self.m:
            return neighbors.pop(0)

        return None

    def node_ids(self) -> List[int]:
        """All node IDs in insertion order."""
        return list(self.nodes.keys())

    def size(self) -> int:
        """
        Get the total number of nodes in the graph.

        Returns:
            Number of nodes
        """
        return len(self.nodes)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"ProximityGraph(nodes={self.size()}, max_level={self.max_level}, m={self.m})"
