"""
k-means anticlustering objective, kept up to date one swap at a time.

The objective of a group is the sum of squared Euclidean distances of its
members to the group centroid; the total is the sum over all *K* groups.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .store import ElementStore


@dataclass(slots=True)
class Probe:
    """Hypothetical engine state after a simulated swap."""
    objectives  : np.ndarray            # one value per group
    total       : float
    centers     : Optional[np.ndarray] = None


class VarianceEngine:
    """
    Centroids and within-group variances for the feature variant.

    Parameters
    ----------
    store : ElementStore
        Membership the engine reads and (through probes and commits) swaps.
    features : np.ndarray, shape (N, M)
        One feature vector per element.
    """

    def __init__(self, store: ElementStore, features: np.ndarray):
        self.store      = store
        self.features   = np.asarray(features, dtype=float)
        if self.features.ndim == 1:
            self.features = self.features[:, None]
        self.centers    = np.array(
            [self.compute_center(g) for g in range(store.k)], dtype=float,
        ).reshape(store.k, self.features.shape[1])
        self.objectives = np.array(
            [self.cluster_variance(g, self.centers[g]) for g in range(store.k)],
            dtype=float,
        )

    @property
    def objective(self) -> float:
        return float(self.objectives.sum())

    def candidates(self, i: int) -> Iterable[int]:
        """Every element is a potential exchange partner."""
        return range(self.store.n)

    # ------------------------------------------------------------------ #
    # objective pieces                                                   #
    # ------------------------------------------------------------------ #
    def compute_center(self, g: int) -> np.ndarray:
        """Mean feature vector of group *g*, scaled by its fixed frequency."""
        members = self.store.members(g)
        if self.store.frequencies[g] == 0:
            return np.zeros(self.features.shape[1])
        return self.features[members].sum(axis=0) / self.store.frequencies[g]

    def cluster_variance(self, g: int, center: np.ndarray) -> float:
        diff = self.features[self.store.members(g)] - center
        return float(np.einsum("ij,ij->", diff, diff))

    # ------------------------------------------------------------------ #
    # simulate / revert / commit                                         #
    # ------------------------------------------------------------------ #
    def simulate(self, i: int, j: int) -> Probe:
        """
        Swap *i* and *j* in the store and return the resulting objective.

        The centroids of both affected groups are shifted in closed form;
        their variances are then recomputed from the swapped membership.
        The store stays swapped until :meth:`revert` or :meth:`commit`.
        """
        store = self.store
        g1, g2 = store.label(i), store.label(j)
        x_i, x_j = self.features[i], self.features[j]

        f1, f2 = store.frequencies[g1], store.frequencies[g2]

        centers = self.centers.copy()
        centers[g1] = centers[g1] + x_j / f1 - x_i / f1
        centers[g2] = centers[g2] - x_j / f2 + x_i / f2

        store.swap(i, j)
        objectives = self.objectives.copy()
        objectives[g1] = self.cluster_variance(g1, centers[g1])
        objectives[g2] = self.cluster_variance(g2, centers[g2])
        return Probe(objectives=objectives, total=float(objectives.sum()), centers=centers)

    def revert(self, i: int, j: int) -> None:
        self.store.swap(i, j)

    def commit(self, i: int, j: int, probe: Probe) -> None:
        """Apply the swap for good and adopt the probe's centroids and variances."""
        self.store.swap(i, j)
        self.centers = probe.centers
        self.objectives = probe.objectives
