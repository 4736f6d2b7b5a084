import numpy as np
import pytest

from anticlust.metrics import (
    cluster_centers,
    diversity_objective,
    get_dissimilarity_matrix,
    variance_objective,
)


def test_dissimilarity_matrix_metrics(four_points):
    np.testing.assert_allclose(get_dissimilarity_matrix(four_points)[0], [0, 0, 10, 10])
    np.testing.assert_allclose(
        get_dissimilarity_matrix(four_points, "sqeuclidean")[0], [0, 0, 100, 100]
    )


def test_unknown_metric(four_points):
    with pytest.raises(ValueError, match="Unsupported"):
        get_dissimilarity_matrix(four_points, "cosine")


def test_cluster_centers(four_points):
    centers = cluster_centers(four_points, np.array([0, 1, 0, 1]))
    np.testing.assert_allclose(centers, [[5.0], [5.0]])


def test_variance_objective(four_points):
    assert variance_objective(four_points, np.array([0, 0, 1, 1])) == 0.0
    assert variance_objective(four_points, np.array([0, 1, 0, 1])) == pytest.approx(100.0)


def test_variance_objective_with_label_gaps(four_points):
    # labels need not be 0 … K-1
    assert variance_objective(four_points, np.array([3, 7, 3, 7])) == pytest.approx(100.0)


def test_diversity_objective(four_points, four_point_distances):
    labels = np.array([0, 1, 0, 1])
    assert diversity_objective(four_point_distances, labels) == pytest.approx(20.0)
    assert diversity_objective(four_points, labels) == pytest.approx(20.0)


def test_cityblock_matrix():
    X = np.array([[0.0, 0.0], [1.0, 2.0], [-1.0, 1.0]])
    np.testing.assert_allclose(get_dissimilarity_matrix(X, "cityblock")[1], [3, 0, 3])


def test_diversity_objective_with_label_gaps(four_point_distances):
    assert diversity_objective(four_point_distances, np.array([5, 2, 5, 2])) == pytest.approx(20.0)
