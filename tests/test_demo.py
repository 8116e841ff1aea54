"""
Tests for the clustered demo.
"""

import logging

import numpy as np
from smallworld.demo import build_clustered_dataset, main


def test_build_clustered_dataset_shape():
    """Dataset has one row per point and one centre per cluster"""
    vectors, centers = build_clustered_dataset(n_clusters=3, points_per_cluster=7, dimension=4)

    assert vectors.shape == (21, 4)
    assert centers.shape == (3, 4)


def test_build_clustered_dataset_reproducible():
    """Same seed gives the same data"""
    a, _ = build_clustered_dataset(seed=1)
    b, _ = build_clustered_dataset(seed=1)

    assert np.array_equal(a, b)


def test_points_stay_near_centres():
    """Every point is closer to some centre than the spread allows to wander"""
    vectors, centers = build_clustered_dataset(cluster_std=0.1, dimension=4)

    nearest = np.min(np.linalg.norm(vectors[:, None, :] - centers[None, :, :], axis=2), axis=1)
    assert np.all(nearest < 1.0)


def test_main_prints_results(capsys):
    """The demo runs end to end and prints a ranked list"""
    main()

    out = capsys.readouterr().out
    assert "SmallWorld Clustered Demo" in out
    assert "Recall@10" in out
    assert "id=" in out
    assert "Reciprocal rank of true nearest" in out
    assert "directed edges" in out
    assert "One-directional edges left by trimming" in out
    assert "Nodes reachable from the top result" in out

    logging.getLogger("smallworld").handlers.clear()
    logging.getLogger("smallworld").addHandler(logging.NullHandler())
