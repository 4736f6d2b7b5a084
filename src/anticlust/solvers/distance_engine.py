"""
Anticluster editing ("diversity") objective on a precomputed distance matrix,
plus the category index that restricts exchange partners.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .store import ElementStore
from .variance_engine import Probe


class CategoryIndex:
    """
    Per category, the indices of its elements in ascending order.

    Parameters
    ----------
    n : int
        Number of elements.
    categories : array-like of int, shape (N,), optional
        Category label per element in ``0 … C-1``. ``None`` puts every element
        into one implicit category, which turns the restriction off.
    frequencies : array-like of int, shape (C,), optional
        Elements per category. Derived from ``categories`` when omitted.
    """

    def __init__(
        self,
        n           : int,
        categories  : Optional[Sequence[int]]   = None,
        frequencies : Optional[Sequence[int]]   = None,
    ):
        if categories is None:
            self.labels = np.zeros(n, dtype=np.intp)
            self._heads: List[np.ndarray] = [np.arange(n, dtype=np.intp)]
            return

        self.labels = np.array(categories, dtype=np.intp)
        if frequencies is None:
            frequencies = np.bincount(self.labels)
        self._heads = [np.empty(int(f), dtype=np.intp) for f in frequencies]

        fill = np.zeros(len(self._heads), dtype=np.intp)
        for i, c in enumerate(self.labels):
            self._heads[c][fill[c]] = i
            fill[c] += 1

    @property
    def n_categories(self) -> int:
        return len(self._heads)

    def category(self, i: int) -> int:
        return int(self.labels[i])

    def partners(self, i: int) -> np.ndarray:
        """All elements sharing *i*'s category (including *i* itself)."""
        return self._heads[self.labels[i]]


class DistanceEngine:
    """
    Summed within-group distances for the distance variant.

    Parameters
    ----------
    store : ElementStore
    distances : np.ndarray, shape (N, N)
        Dissimilarities with a zero diagonal.
    category_index : CategoryIndex, optional
        Exchange partners are looked up here; defaults to a single category.
    """

    def __init__(
        self,
        store           : ElementStore,
        distances       : np.ndarray,
        category_index  : Optional[CategoryIndex] = None,
    ):
        self.store          = store
        self.distances      = np.asarray(distances, dtype=float)
        self.category_index = (
            category_index if category_index is not None else CategoryIndex(store.n)
        )
        self.objectives     = np.array(
            [self.distances_within(g) for g in range(store.k)], dtype=float
        )

    @property
    def objective(self) -> float:
        return float(self.objectives.sum())

    def candidates(self, i: int) -> np.ndarray:
        return self.category_index.partners(i)

    # ------------------------------------------------------------------ #
    # objective pieces                                                   #
    # ------------------------------------------------------------------ #
    def distances_one_element(self, i: int, g: int) -> float:
        """Sum of distances from element *i* to every current member of group *g*."""
        return float(self.distances[i, self.store.members(g)].sum())

    def distances_within(self, g: int) -> float:
        """Sum of distances over all unordered member pairs of group *g*."""
        members = self.store.members(g)
        sub = self.distances[np.ix_(members, members)]
        return float(np.triu(sub, k=1).sum())

    # ------------------------------------------------------------------ #
    # simulate / revert / commit                                         #
    # ------------------------------------------------------------------ #
    def simulate(self, i: int, j: int) -> Probe:
        """
        Swap *i* and *j* in the store and return the resulting objective.

        Each group first loses the distances of its leaving element, then,
        after the swap, gains the distances of its arriving element. The
        self-distance on the diagonal contributes zero to both scans.
        """
        store = self.store
        g1, g2 = store.label(i), store.label(j)

        objectives = self.objectives.copy()
        objectives[g1] -= self.distances_one_element(i, g1)
        objectives[g2] -= self.distances_one_element(j, g2)
        store.swap(i, j)
        objectives[g1] += self.distances_one_element(j, g1)
        objectives[g2] += self.distances_one_element(i, g2)
        return Probe(objectives=objectives, total=float(objectives.sum()))

    def revert(self, i: int, j: int) -> None:
        self.store.swap(i, j)

    def commit(self, i: int, j: int, probe: Probe) -> None:
        self.store.swap(i, j)
        self.objectives = probe.objectives
