"""
Objective functions evaluated from scratch for a complete labelling.

The exchange engines update these objectives incrementally; the functions
here recompute them directly and are used to score solver output and to
cross-check the running values.
"""
import numpy as np
from scipy.spatial.distance import cdist

# scipy names of the metrics a distance matrix may be derived with
METRICS = ("euclidean", "sqeuclidean", "cityblock")


def get_dissimilarity_matrix(X: np.ndarray, metric: str = "euclidean") -> np.ndarray:
    """
    Pairwise ``(N, N)`` dissimilarities between the rows of *X*.

    Raises
    ------
    ValueError
        If *metric* is not one of :data:`METRICS`.
    """
    if metric not in METRICS:
        raise ValueError(f"Unsupported metric '{metric}'. Available: {list(METRICS)}")
    X = np.asarray(X, dtype=float)
    return cdist(X, X, metric=metric)


def diversity_objective(data: np.ndarray, clusters: np.ndarray) -> float:
    """
    Sum of pairwise distances over all unordered pairs inside each group.

    *data* is either a square dissimilarity matrix or a feature matrix, which
    is turned into Euclidean distances first.
    """
    data = np.asarray(data, dtype=float)
    if data.ndim != 2 or data.shape[0] != data.shape[1]:
        data = get_dissimilarity_matrix(data)
    clusters = np.asarray(clusters)

    same_group = clusters[:, None] == clusters[None, :]
    return float(np.triu(np.where(same_group, data, 0.0), k=1).sum())


def cluster_centers(data: np.ndarray, clusters: np.ndarray) -> np.ndarray:
    """Group means, one row per distinct label in ascending label order."""
    data = np.asarray(data, dtype=float)
    return np.vstack([data[clusters == g].mean(axis=0) for g in np.unique(clusters)])


def variance_objective(data: np.ndarray, clusters: np.ndarray) -> float:
    """Sum of squared Euclidean distances of the elements to their group mean."""
    data = np.asarray(data, dtype=float)
    if data.ndim == 1:
        data = data[:, None]
    clusters = np.asarray(clusters)
    _, position = np.unique(clusters, return_inverse=True)
    diff = data - cluster_centers(data, clusters)[position.ravel()]
    return float(np.einsum("ij,ij->", diff, diff))
