"""
Tests for the insertion algorithm.

These tests verify that the builder correctly inserts nodes into the graph:
- First node insertion (special case)
- Exhaustive nearest-neighbor selection
- FIFO trimming that keeps every list within m
- One-directional edges left behind by trimming
"""

import numpy as np
import pytest
from smallworld.graph.graph import ProximityGraph
from smallworld.graph.builder import GraphBuilder
from smallworld.exceptions import DimensionMismatchError


def test_insert_first_node():
    """The first node has nothing to connect to"""
    graph = ProximityGraph(m=4)
    builder = GraphBuilder(graph)

    node_id = builder.insert(np.array([1.0, 0.0, 0.0]), level=2)

    assert node_id == 0
    assert graph.size() == 1
    assert graph.max_level == 2
    assert graph.get_node(0).neighbors == []


def test_insert_two_nodes():
    """Two nodes should connect in both directions"""
    graph = ProximityGraph(m=4)
    builder = GraphBuilder(graph)

    builder.insert(np.array([1.0, 0.0]), level=0)
    builder.insert(np.array([0.9, 0.1]), level=0)

    assert graph.get_node(0).neighbors == [1]
    assert graph.get_node(1).neighbors == [0]


def test_insert_selects_closest_nodes():
    """New node should link to the m nearest existing nodes, closest first"""
    graph = ProximityGraph(m=2)
    builder = GraphBuilder(graph)

    for x in [0.0, 10.0, 3.0, 7.0]:
        builder.insert(np.array([x]), level=0)

    new_id = builder.insert(np.array([6.0]), level=0)

    # Distances from 6.0: id0=6, id1=4, id2=3, id3=1
    assert graph.get_node(new_id).neighbors == [3, 2]


def test_insert_never_links_to_itself():
    """Neighbor selection excludes the node being inserted"""
    graph = ProximityGraph(m=8)
    builder = GraphBuilder(graph)

    for i in range(6):
        builder.insert(np.array([float(i), 1.0]), level=0)

    for node_id, node in graph.nodes.items():
        assert node_id not in node.neighbors


def test_insert_ties_resolved_by_insertion_order():
    """Equidistant candidates keep insertion order"""
    graph = ProximityGraph(m=1)
    builder = GraphBuilder(graph)

    builder.insert(np.array([0.0]), level=0)
    builder.insert(np.array([2.0]), level=0)
    new_id = builder.insert(np.array([1.0]), level=0)

    assert graph.get_node(new_id).neighbors == [0]


def test_insert_respects_m_constraint():
    """No neighbor list should ever exceed m"""
    graph = ProximityGraph(m=2)
    builder = GraphBuilder(graph)

    rng = np.random.default_rng(0)
    for _ in range(30):
        builder.insert(rng.random(3), level=0)

        for node in graph.nodes.values():
            assert len(node.neighbors) <= graph.m, (
                f"Node {node.id} has {len(node.neighbors)} neighbors, exceeds m={graph.m}"
            )


def test_fifo_eviction_can_drop_closer_edge():
    """Trimming removes the oldest entry even when it is the closest"""
    graph = ProximityGraph(m=1)
    builder = GraphBuilder(graph)

    builder.insert(np.array([0.0]), level=0)   # id 0
    builder.insert(np.array([0.1]), level=0)   # id 1, links to 0
    builder.insert(np.array([5.0]), level=0)   # id 2, nearest is 1

    # Node 1 kept its far new neighbor and lost the close one
    assert graph.get_node(1).neighbors == [2]
    assert graph.get_node(2).neighbors == [1]


def test_eviction_leaves_one_directional_edge():
    """The evicted node still points at the node that dropped it"""
    graph = ProximityGraph(m=1)
    builder = GraphBuilder(graph)

    builder.insert(np.array([0.0]), level=0)   # id 0
    builder.insert(np.array([1.0]), level=0)   # id 1 <-> 0
    builder.insert(np.array([0.1]), level=0)   # id 2 -> 0, 0 evicts 1

    assert graph.get_node(0).neighbors == [2]
    assert graph.get_node(1).neighbors == [0]
    assert 1 not in graph.get_node(0).neighbors


def test_insert_dimension_mismatch():
    """A vector of the wrong length fails during neighbor selection"""
    graph = ProximityGraph(m=4)
    builder = GraphBuilder(graph)

    builder.insert(np.array([1.0, 2.0]), level=0)

    with pytest.raises(DimensionMismatchError):
        builder.insert(np.array([1.0, 2.0, 3.0]), level=0)

    # The node was stored before the failing comparison
    assert graph.size() == 2
    assert graph.get_node(1).neighbors == []


def test_first_node_of_any_dimension_is_accepted():
    """With nothing to compare against, no check can fail"""
    graph = ProximityGraph(m=4)
    builder = GraphBuilder(graph)

    node_id = builder.insert(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), level=0)

    assert node_id == 0
