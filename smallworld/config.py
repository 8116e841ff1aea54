"""Configuration for SmallWorld indexes.

Usage:
    from smallworld import SmallWorldIndex, IndexConfig

    # Default config
    index = SmallWorldIndex()

    # Custom config
    config = IndexConfig(m=4, ef=50, seed=7)
    index = SmallWorldIndex(config=config)

    # From file
    config = IndexConfig.from_json("my_config.json")
    index = SmallWorldIndex(config=config)
"""

from typing import Dict, Any, Optional
import json
import numbers
from dataclasses import dataclass, asdict


@dataclass
class IndexConfig:
    """Configuration for SmallWorldIndex.

    Graph:
        m: Maximum neighbor-list length per node after trimming

    Search:
        ef: Default candidate queue cap for knn queries
        num_seeds: Random entry points drawn per query

    Randomness:
        seed: Seed for the index's random generator (None = unseeded)
    """

    m: int = 8
    ef: int = 20
    num_seeds: int = 3
    seed: Optional[int] = None

    # Metadata
    config_name: str = "default"

    def __post_init__(self):
        """Validate configuration."""
        for name in ("m", "ef", "num_seeds"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer")

        if self.m < 1:
            raise ValueError("m must be >= 1")

        if self.ef < 0:
            raise ValueError("ef must be >= 0")

        if self.num_seeds < 1:
            raise ValueError("num_seeds must be >= 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_json(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'IndexConfig':
        """Load configuration from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'IndexConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"IndexConfig("
            f"{self.config_name}, "
            f"m={self.m}, ef={self.ef}, seeds={self.num_seeds})"
        )


def get_default_config() -> IndexConfig:
    """Default configuration."""
    return IndexConfig(config_name="default")
