"""
SmallWorld - In-memory approximate nearest neighbor search

A small-world proximity graph over fixed-dimension real vectors, built by
exhaustive neighbor selection on insert and queried by bounded greedy
expansion with an ef accuracy/speed knob.
"""

__version__ = "0.1.0"

from smallworld.index import SmallWorldIndex
from smallworld.config import IndexConfig, get_default_config
from smallworld.exceptions import SmallWorldError, DimensionMismatchError

__all__ = [
    "SmallWorldIndex",
    "IndexConfig",
    "get_default_config",
    "SmallWorldError",
    "DimensionMismatchError",
]
