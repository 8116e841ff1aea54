"""
Proximity graph search algorithm.

This module handles querying the graph for approximate nearest neighbors.
The search algorithm:
1. Picks a few random seed nodes (3 by default)
2. Walks a single distance-sorted candidate queue front to back
3. Pushes every neighbor of each walked node into the queue
4. Caps the queue at ef entries by dropping the current worst
5. Returns the first k entries of the final queue

The queue is both the frontier and the result buffer. A node is marked
visited the first time it is pushed and is never pushed again during that
search, even if the ef cap later drops it.

The ef parameter controls the accuracy-speed tradeoff:
- Higher ef = more candidates kept alive, better recall, slower search
- Lower ef = faster search, lower recall
"""

from typing import List, Optional, Set, Tuple

import numpy as np
import numpy.typing as npt

from smallworld.graph.graph import ProximityGraph
from smallworld.graph.distance import euclidean_distance
from smallworld.utils.logging import get_logger

Vector = npt.NDArray[np.float64]

logger = get_logger(__name__)


class GraphSearcher:
    """
    Handles k-nearest-neighbor queries on the proximity graph.
    """

    def __init__(
        self,
        graph: ProximityGraph,
        ef: int = 20,
        num_seeds: int = 3,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize searcher with a graph.

        Args:
            graph: The ProximityGraph to search in
            ef: Default cap on the candidate queue (higher = better recall)
            num_seeds: Random entry points drawn per query
            rng: Random generator used to pick seeds
        """
        self.graph = graph
        self.ef = ef
        self.num_seeds = num_seeds
        self.rng = rng if rng is not None else np.random.default_rng()

    def search(
        self, query: Vector, k: int, ef: Optional[int] = None
    ) -> List[Tuple[int, float]]:
        """
        Search for approximate k nearest neighbors to the query vector.

        Args:
            query: Query vector to search for
            k: Number of nearest neighbors to return
            ef: Override default ef for this query

        Returns:
            List of (node_id, distance) tuples, sorted by distance (closest
            first), at most min(k, ef) long

        Raises:
            DimensionMismatchError: If the query's length differs from any
                vector it is compared against
        """
        if self.graph.size() == 0:
            return []

        if ef is None:
            ef = self.ef

        visited: Set[int] = set()
        queue: List[Tuple[int, float]] = []

        def push_candidate(node_id: int) -> None:
            if node_id in visited:
                return
            visited.add(node_id)

            node = self.graph.get_node(node_id)
            queue.append((node_id, euclidean_distance(query, node.vector)))
            queue.sort(key=lambda x: x[1])

            # Drop the worst after sorting, which may not be the new entry
            if len(queue) > ef:
                queue.pop()

        for seed_id in self._pick_seeds():
            push_candidate(seed_id)

        # The queue may reorder and grow while it is being walked
        position = 0
        while position < len(queue):
            current_id, _ = queue[position]
            for neighbor_id in self.graph.get_node(current_id).neighbors:
                push_candidate(neighbor_id)
            position += 1

        results = queue[:max(k, 0)]
        logger.debug(
            "Search k=%d ef=%d visited %d of %d nodes, returning %d results",
            k, ef, len(visited), self.graph.size(), len(results),
        )
        return results

    def _pick_seeds(self) -> List[int]:
        """
        Draw distinct random node IDs to start the search from.

        Returns:
            Up to num_seeds IDs, fewer if the graph is smaller
        """
        node_ids = self.graph.node_ids()
        num_seeds = min(self.num_seeds, len(node_ids))
        picks = self.rng.choice(len(node_ids), size=num_seeds, replace=False)
        return [node_ids[int(i)] for i in picks]
