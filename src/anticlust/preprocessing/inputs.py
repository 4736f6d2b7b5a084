"""
Input coercion, validation and initial assignments for the exchange solvers.

The exchange core trusts its arguments; everything a caller can get wrong is
checked here once, before the sweep starts.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.preprocessing import StandardScaler

_LOG = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
#                               data matrices                                 #
# --------------------------------------------------------------------------- #
def as_feature_matrix(X, *, standardize: bool = False) -> np.ndarray:
    """
    Return *X* as a finite ``(N, M)`` float array.

    A 1-D input is read as *N* elements with a single feature. DataFrames
    are accepted and lose their column labels.
    """
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError(f"X must be a 1-D or 2-D array, got shape {X.shape}")
    if not np.isfinite(X).all():
        raise ValueError("X contains NaN or infinite values")
    if standardize:
        X = StandardScaler().fit_transform(X)
        _LOG.debug("Standardized %d features", X.shape[1])
    return X


def as_distance_matrix(D) -> np.ndarray:
    """Return *D* as a finite square float array with a zero diagonal."""
    D = np.asarray(D, dtype=float)
    if D.ndim != 2 or D.shape[0] != D.shape[1]:
        raise ValueError("D must be a square distance matrix.")
    if not np.isfinite(D).all():
        raise ValueError("D contains NaN or infinite values")
    if np.any(np.diag(D) != 0):
        raise ValueError("D must have a zero diagonal")
    return D


# --------------------------------------------------------------------------- #
#                              labels & categories                            #
# --------------------------------------------------------------------------- #
def frequencies_from_labels(labels: np.ndarray, n_clusters: int) -> np.ndarray:
    """Member count per group ``0 … K-1``."""
    return np.bincount(labels, minlength=n_clusters).astype(np.intp)


def validate_labels(
    labels      : Sequence[int],
    n_items     : int,
    n_clusters  : int,
    sizes       : Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Check a caller-supplied initial assignment, and its group sizes if given.

    Returns
    -------
    np.ndarray
        A private ``intp`` copy of *labels*.
    """
    labels = np.asarray(labels)
    if labels.ndim != 1 or len(labels) != n_items:
        raise ValueError(
            f"initial labels must be a 1-D array of length {n_items}, got shape {labels.shape}"
        )
    if not np.issubdtype(labels.dtype, np.integer):
        raise TypeError("initial labels must contain integers")
    if n_items and (labels.min() < 0 or labels.max() >= n_clusters):
        raise ValueError(
            "initial labels outside the expected 0…K-1 range. "
            f"Values range: {labels.min()}...{labels.max()}"
        )
    counts = frequencies_from_labels(labels, n_clusters)
    if sizes is not None and not np.array_equal(counts, sizes):
        raise ValueError(
            f"initial labels give group sizes {counts.tolist()}, expected {list(sizes)}"
        )
    return labels.astype(np.intp)


def encode_categories(categories, n_items: int) -> Tuple[np.ndarray, int]:
    """
    Recode arbitrary category values to ``0 … C-1``.

    Codes follow the sorted order of the distinct values.

    Returns
    -------
    codes : np.ndarray, shape (N,)
    n_categories : int
    """
    values = np.asarray(categories)
    if values.ndim != 1 or len(values) != n_items:
        raise ValueError(
            f"categories must be a 1-D array of length {n_items}, got shape {values.shape}"
        )
    codes, uniques = pd.factorize(values, sort=True)
    if (codes < 0).any():
        raise ValueError("categories must not contain missing values")
    return codes.astype(np.intp), len(uniques)


# --------------------------------------------------------------------------- #
#                              initial assignments                            #
# --------------------------------------------------------------------------- #
def random_labels(
    sizes           : Sequence[int],
    random_state    : Optional[int | np.random.Generator] = None,
) -> np.ndarray:
    """Random assignment with exactly ``sizes[g]`` members in group *g*."""
    rng = np.random.default_rng(random_state)
    labels = np.repeat(np.arange(len(sizes)), sizes)
    rng.shuffle(labels)
    return labels


def categorical_labels(
    categories      : np.ndarray,
    sizes           : Sequence[int],
    random_state    : Optional[int | np.random.Generator] = None,
) -> np.ndarray:
    """
    Random assignment that spreads every category evenly over the groups.

    Group slots are interleaved in proportion to the group sizes and dealt
    out to the elements ordered by category (random order inside each
    category). Each group therefore receives about ``sizes[g] / N`` of every
    category, and group sizes are met exactly.
    """
    rng = np.random.default_rng(random_state)
    sizes = np.asarray(sizes, dtype=np.intp)

    pool = np.repeat(np.arange(len(sizes)), sizes)
    rank = np.concatenate([np.arange(s) / s for s in sizes])
    pool = pool[np.argsort(rank, kind="stable")]

    order = np.lexsort((rng.permutation(len(categories)), categories))
    labels = np.empty(len(categories), dtype=np.intp)
    labels[order] = pool
    return labels
