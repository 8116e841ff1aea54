"""
Custom exceptions for SmallWorld.
"""


class SmallWorldError(Exception):
    """Base exception for SmallWorld."""
    pass


class DimensionMismatchError(SmallWorldError, ValueError):
    """Two vectors of different lengths were compared."""

    def __init__(self, len_a: int, len_b: int) -> None:
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"Cannot compare vectors of dimension {len_a} and {len_b}"
        )
