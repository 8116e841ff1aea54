"""
Proximity graph implementation module.

This module contains the core components for building and searching a
single-layer small-world graph for approximate nearest neighbor queries.

Components:
- distance: Euclidean distance
- utils: Helper functions (level assignment, neighbor selection)
- graph: Node and graph containers
- builder: Insertion algorithm
- searcher: Search algorithm
"""

from smallworld.graph.distance import euclidean_distance
from smallworld.graph.graph import Node, ProximityGraph
from smallworld.graph.builder import GraphBuilder
from smallworld.graph.searcher import GraphSearcher

__all__ = [
    "euclidean_distance",
    "Node",
    "ProximityGraph",
    "GraphBuilder",
    "GraphSearcher",
]
