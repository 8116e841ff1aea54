"""
Utility functions for proximity graph construction.

This module provides helper functions used when inserting nodes:
- Level assignment: draws a per-node level from a geometric distribution
- Neighbor selection: chooses which existing nodes a new node connects to

Levels are bookkeeping only. The graph records the highest level seen, but
neither insertion nor search ever looks at a node's level.
"""

from typing import List, Optional

import numpy as np


def random_level(rng: Optional[np.random.Generator] = None) -> int:
    """
    Draw a level by repeated fair coin flips.

    Each flip that comes up heads raises the level by one; the first tails
    stops. This gives P(level >= l) = (1/2)^l and an expected level of 1.

    Args:
        rng: Random generator to draw from (a fresh one if omitted)

    Returns:
        Non-negative integer level

    Example:
        >>> rng = np.random.default_rng(0)
        >>> levels = [random_level(rng) for _ in range(10000)]
        >>> sum(1 for lv in levels if lv == 0) / 10000  # ~0.5
    """
    if rng is None:
        rng = np.random.default_rng()

    level = 0
    while rng.random() < 0.5:
        level += 1

    return level


def select_neighbors_simple(
    candidates: List[int], distances: List[float], m: int
) -> List[int]:
    """
    Pick the neighbor set for a newly inserted node.

    The builder passes every other node in insertion order, so with a
    stable sort equidistant nodes resolve to the one inserted first. There
    is no diversity heuristic: the result is purely the m closest.

    Args:
        candidates: Existing node IDs, in insertion order
        distances: Euclidean distance from the new vector to each candidate
        m: Connectivity target of the graph

    Returns:
        Up to m node IDs, closest first

    Example:
        >>> select_neighbors_simple([10, 20, 30, 40], [0.5, 0.2, 0.8, 0.3], m=2)
        [20, 40]
    """
    if len(candidates) == 0:
        return []

    paired = list(zip(candidates, distances))
    paired_sorted = sorted(paired, key=lambda x: x[1])

    return [node_id for node_id, _ in paired_sorted[:m]]
