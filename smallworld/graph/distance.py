"""
Distance metrics for vector comparisons.

The proximity graph ranks everything by Euclidean (L2) distance: the square
root of the sum of squared coordinate differences. Two vectors can only be
compared when they are one-dimensional and have the same length. A mismatch
is never padded or truncated; it raises DimensionMismatchError at the point
of comparison.
"""

import numpy as np
import numpy.typing as npt

from smallworld.exceptions import DimensionMismatchError

Vector = npt.NDArray[np.float64]


def _check_dimensions(v1: Vector, v2: Vector) -> None:
    if v1.ndim != 1 or v2.ndim != 1:
        raise ValueError(
            f"Expected 1D vectors, got arrays with shapes {v1.shape} and {v2.shape}"
        )

    # numpy would happily broadcast a length-1 vector against anything
    if len(v1) != len(v2):
        raise DimensionMismatchError(len(v1), len(v2))


def euclidean_distance(v1: Vector, v2: Vector) -> float:
    """
    Compute Euclidean distance between two vectors.

    Args:
        v1: First vector (1D array or sequence of floats)
        v2: Second vector, same length as v1

    Returns:
        Non-negative distance (0.0 means identical)

    Raises:
        DimensionMismatchError: If the vectors differ in length
        ValueError: If either input is not one-dimensional

    Example:
        >>> euclidean_distance(np.array([0.0, 0.0]), np.array([3.0, 4.0]))
        5.0
    """
    v1 = np.asarray(v1, dtype=np.float64)
    v2 = np.asarray(v2, dtype=np.float64)
    _check_dimensions(v1, v2)

    return float(np.linalg.norm(v1 - v2))
