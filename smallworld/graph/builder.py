"""
Proximity graph construction and insertion logic.

This module handles adding new nodes to the graph. The insertion algorithm:
1. Stores the new node with an empty neighbor list
2. Measures the distance from the new vector to every existing node
3. Keeps the m closest as the new node's neighbors
4. Appends the new node to each of those neighbors' lists
5. Trims any list that grew past m by dropping its oldest entry

There is no search structure behind step 2: every insert is a full scan,
so insertion cost grows linearly with the index.
"""

from typing import List

import numpy as np
import numpy.typing as npt

from smallworld.graph.graph import ProximityGraph
from smallworld.graph.distance import euclidean_distance
from smallworld.graph.utils import select_neighbors_simple
from smallworld.utils.logging import get_logger

Vector = npt.NDArray[np.float64]

logger = get_logger(__name__)


class GraphBuilder:
    """
    Handles insertion of nodes into the proximity graph.
    """

    def __init__(self, graph: ProximityGraph) -> None:
        """
        Initialize builder with a graph to operate on.

        Args:
            graph: The ProximityGraph to insert nodes into
        """
        self.graph = graph

    def insert(self, vector: Vector, level: int) -> int:
        """
        Insert a new node and wire it into the graph.

        The node is stored before any distance is computed, so a dimension
        mismatch raised during neighbor selection leaves it in the graph
        without neighbors.

        Args:
            vector: Vector data for the new node
            level: Level drawn for this node

        Returns:
            The ID assigned to the new node

        Raises:
            DimensionMismatchError: If the vector's length differs from an
                existing node's
        """
        node_id = self.graph.add_node(vector, level)

        # First node: nothing to connect to
        if self.graph.size() == 1:
            logger.debug("Inserted node %d (level %d) as the first node", node_id, level)
            return node_id

        new_node = self.graph.get_node(node_id)
        neighbors = self._select_neighbors(node_id, new_node.vector)
        self.graph.set_neighbors(node_id, neighbors)

        evictions = 0
        for neighbor_id in neighbors:
            evicted = self.graph.append_neighbor(neighbor_id, node_id)
            if evicted is not None:
                evictions += 1
                logger.debug(
                    "Node %d evicted its oldest neighbor %d", neighbor_id, evicted
                )

        logger.debug(
            "Inserted node %d (level %d) with %d neighbors, %d evictions",
            node_id, level, len(neighbors), evictions,
        )
        return node_id

    def _select_neighbors(self, node_id: int, vector: Vector) -> List[int]:
        """
        Rank every other node by distance and keep the m closest.

        Args:
            node_id: The node being inserted (excluded from ranking)
            vector: Its vector

        Returns:
            List of selected neighbor IDs (up to m), closest first
        """
        candidates = []
        distances = []
        for other_id, other in self.graph.nodes.items():
            if other_id == node_id:
                continue
            candidates.append(other_id)
            distances.append(euclidean_distance(vector, other.vector))

        return select_neighbors_simple(candidates, distances, self.graph.m)
