"""
Metrics for evaluating approximate search quality.

This module provides functions to:
- Compute recall@k (fraction of ground truth neighbors retrieved)
- Compute exact ground truth via brute force search
- Compute reciprocal rank of the first correct result
"""

import numpy as np
from typing import List, Tuple

from smallworld.exceptions import DimensionMismatchError


def compute_recall_at_k(
    retrieved_ids: List[int],
    ground_truth_ids: List[int],
    k: int = 10
) -> float:
    """
    Compute recall@k of a knn result against exact neighbors.

    knn may return fewer than k pairs when the ef cap or graph
    reachability cuts the candidate pool short. Missing slots count as
    misses, since the denominator is always k.

    Args:
        retrieved_ids: IDs from SmallWorldIndex.knn, closest first
        ground_truth_ids: IDs from compute_ground_truth_brute_force
        k: Number of neighbors to consider

    Returns:
        Value between 0.0 and 1.0

    Example:
        >>> compute_recall_at_k([1, 2, 3, 99, 98], [1, 2, 3, 4, 5], k=5)
        0.6
    """
    retrieved_set = set(retrieved_ids[:k])
    ground_truth_set = set(ground_truth_ids[:k])

    correct_retrievals = len(retrieved_set & ground_truth_set)

    return correct_retrievals / k if k > 0 else 0.0


def compute_ground_truth_brute_force(
    query_vector: np.ndarray,
    all_vectors: np.ndarray,
    k: int = 10
) -> Tuple[List[int], List[float]]:
    """
    Compute exact k-NN by Euclidean distance (slow but exact).

    Args:
        query_vector: Query vector (1D array, shape: [dim])
        all_vectors: All database vectors (2D array, shape: [n_vectors, dim]),
            row i holding the vector with ID i
        k: Number of neighbors to find

    Returns:
        Tuple of (neighbor_ids, distances), both sorted by distance ascending

    Raises:
        DimensionMismatchError: If the query and rows differ in length
    """
    query_vector = np.asarray(query_vector, dtype=np.float64)
    all_vectors = np.asarray(all_vectors, dtype=np.float64)

    if len(all_vectors) == 0 or k <= 0:
        return [], []

    if all_vectors.shape[1] != len(query_vector):
        raise DimensionMismatchError(len(query_vector), all_vectors.shape[1])

    distances = np.linalg.norm(all_vectors - query_vector, axis=1)

    # Stable sort keeps lower IDs first on ties
    k_indices_sorted = np.argsort(distances, kind="stable")[:k]
    k_distances = distances[k_indices_sorted]

    return k_indices_sorted.tolist(), k_distances.tolist()


def compute_mean_reciprocal_rank(
    retrieved_ids: List[int],
    ground_truth_ids: List[int]
) -> float:
    """
    Compute reciprocal rank for a single query.

    Args:
        retrieved_ids: IDs returned by search (ordered)
        ground_truth_ids: True nearest neighbor IDs

    Returns:
        1/rank of the first correct result, or 0.0 if none was found

    Example:
        >>> compute_mean_reciprocal_rank([99, 98, 1, 2], [1, 2, 3, 4])
        0.333...
    """
    ground_truth_set = set(ground_truth_ids)

    for rank, retrieved_id in enumerate(retrieved_ids, start=1):
        if retrieved_id in ground_truth_set:
            return 1.0 / rank

    return 0.0
