import numpy as np
import pytest
from scipy.spatial.distance import cdist


@pytest.fixture
def four_points():
    """Two tight pairs: {0, 0} and {10, 10}."""
    return np.array([[0.0], [0.0], [10.0], [10.0]])


@pytest.fixture
def four_point_distances(four_points):
    return cdist(four_points, four_points)


@pytest.fixture
def paired_labels():
    return np.array([0, 0, 1, 1])


@pytest.fixture
def features():
    return np.random.default_rng(0).standard_normal((24, 3))


@pytest.fixture
def distances(features):
    return cdist(features, features)


@pytest.fixture
def unequal_labels():
    """24 elements in groups of 6, 10 and 8, shuffled."""
    labels = np.repeat([0, 1, 2], [6, 10, 8])
    np.random.default_rng(1).shuffle(labels)
    return labels
