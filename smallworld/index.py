"""
Public entry point: an in-memory approximate nearest neighbor index.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from smallworld.config import IndexConfig, get_default_config
from smallworld.graph.graph import ProximityGraph, as_vector
from smallworld.graph.builder import GraphBuilder
from smallworld.graph.searcher import GraphSearcher
from smallworld.graph.utils import random_level
from smallworld.utils.logging import get_logger

Vector = npt.NDArray[np.float64]

logger = get_logger(__name__)


class SmallWorldIndex:
    """
    Approximate nearest neighbor index over fixed-dimension real vectors.

    Vectors are inserted one at a time with add() and receive sequential
    IDs starting at 0. knn() answers approximate k-nearest-neighbor queries
    by greedy expansion over the proximity graph.

    Nothing enforces a common dimension at insertion time. Mixing lengths
    raises DimensionMismatchError from whichever add() or knn() call first
    compares the mismatched vectors.

    The index is not thread-safe. Callers sharing one instance across
    threads must serialize access themselves.

    Example:
        >>> index = SmallWorldIndex(m=2, seed=42)
        >>> index.add([0.0, 0.0])
        0
        >>> index.add([10.0, 10.0])
        1
        >>> index.knn([0.0, 0.0], k=1)
        [(0, 0.0)]
    """

    def __init__(
        self,
        m: Optional[int] = None,
        ef: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[IndexConfig] = None,
    ) -> None:
        """
        Initialize an empty index.

        Args:
            m: Maximum neighbors kept per node (default 8)
            ef: Default candidate queue cap for knn (default 20)
            seed: Seed for a new random generator
            rng: Random generator to use; takes precedence over seed
            config: IndexConfig supplying defaults. Explicit arguments
                    override its values.

        Raises:
            ValueError: If m is not a positive integer
        """
        if config is None:
            config = get_default_config()
        self.config = config

        if m is None:
            m = self.config.m
        if ef is None:
            ef = self.config.ef
        if seed is None:
            seed = self.config.seed

        if rng is None:
            rng = np.random.default_rng(seed)
        self._rng = rng

        self._graph = ProximityGraph(m=m)
        self._builder = GraphBuilder(self._graph)
        self._searcher = GraphSearcher(
            self._graph, ef=ef, num_seeds=self.config.num_seeds, rng=self._rng
        )

    @property
    def m(self) -> int:
        """Maximum neighbor-list length."""
        return self._graph.m

    @property
    def ef(self) -> int:
        """Default candidate queue cap used by knn."""
        return self._searcher.ef

    @property
    def max_level(self) -> int:
        """Highest level drawn by any insertion so far."""
        return self._graph.max_level

    @property
    def graph(self) -> ProximityGraph:
        """The underlying graph (for inspection; do not mutate)."""
        return self._graph

    def add(self, vector: Sequence[float]) -> int:
        """
        Insert one vector.

        Args:
            vector: 1D sequence of floats

        Returns:
            The new vector's ID (equal to the number of vectors before it)

        Raises:
            DimensionMismatchError: If the vector's length differs from a
                previously inserted vector's
        """
        level = random_level(self._rng)
        previous_max = self._graph.max_level

        node_id = self._builder.insert(vector, level)

        if self._graph.max_level > previous_max:
            logger.debug("max_level raised from %d to %d", previous_max, self._graph.max_level)

        return node_id

    def add_items(self, vectors: Sequence[Sequence[float]]) -> List[int]:
        """
        Insert several vectors in order.

        Args:
            vectors: Iterable of vectors, or a 2D array (one row per vector)

        Returns:
            List of assigned IDs, in input order
        """
        return [self.add(vector) for vector in vectors]

    def knn(
        self, query: Sequence[float], k: int, ef: Optional[int] = None
    ) -> List[Tuple[int, float]]:
        """
        Find approximate k nearest neighbors of a query vector.

        Results are best-effort: they depend on the random seed nodes, on ef
        and on which part of the graph is reachable from the seeds. Fewer
        than k results come back when fewer candidates survive.

        Args:
            query: Query vector
            k: Number of neighbors to return
            ef: Candidate queue cap for this query (default: the index's ef)

        Returns:
            List of (id, distance) tuples, closest first, at most min(k, ef)
            long. Empty for an empty index or k <= 0.

        Raises:
            DimensionMismatchError: If the query's length differs from any
                vector it is compared against
            ValueError: If the query is not one-dimensional
        """
        query = as_vector(query)
        return self._searcher.search(query, k=k, ef=ef)

    def get_vector(self, node_id: int) -> Vector:
        """
        Return the stored (read-only) vector for an ID.

        Raises:
            KeyError: If no vector has that ID
        """
        return self._graph.nodes[node_id].vector

    def get_neighbors(self, node_id: int) -> List[int]:
        """
        Return a copy of a node's neighbor list, oldest first.

        Raises:
            KeyError: If no vector has that ID
        """
        return list(self._graph.nodes[node_id].neighbors)

    def size(self) -> int:
        """
        Get the number of vectors in the index.

        Returns:
            Number of vectors stored
        """
        return self._graph.size()

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"SmallWorldIndex(size={self.size()}, m={self.m}, ef={self.ef}, max_level={self.max_level})"
