"""
Element & group bookkeeping shared by both exchange variants.

Every element ``0 … N-1`` carries one group label. Each group keeps an ordered
member list, and every element remembers its slot in that list, so a swap of
two elements touches exactly four cells and never scans a list.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np


class ElementStore:
    """
    Group membership of *N* elements in *K* fixed-size groups.

    Parameters
    ----------
    clusters : array-like of int, shape (N,)
        Initial group label per element, values in ``0 … K-1``.
    frequencies : array-like of int, shape (K,)
        Member count per group. Must match the label multiplicities; this is
        the caller's responsibility and is not re-checked here.

    Notes
    -----
    The store copies ``clusters``; the caller's array is never written.
    """

    def __init__(self, clusters: Sequence[int], frequencies: Sequence[int]):
        self.labels         : np.ndarray        = np.array(clusters, dtype=np.intp)
        self.frequencies    : np.ndarray        = np.array(frequencies, dtype=np.intp)
        self._members       : List[List[int]]   = [[] for _ in range(len(self.frequencies))]
        self._slot          : np.ndarray        = np.empty(len(self.labels), dtype=np.intp)

        for i, g in enumerate(self.labels):
            self._slot[i] = len(self._members[g])
            self._members[g].append(i)

    # ------------------------------------------------------------------ #
    # read access                                                        #
    # ------------------------------------------------------------------ #
    @property
    def n(self) -> int:
        return len(self.labels)

    @property
    def k(self) -> int:
        return len(self.frequencies)

    def label(self, i: int) -> int:
        return int(self.labels[i])

    def members(self, g: int) -> List[int]:
        """Element indices currently in group *g* (do not mutate)."""
        return self._members[g]

    def slot(self, i: int) -> int:
        """Position of element *i* inside its group's member list."""
        return int(self._slot[i])

    def group_sizes(self) -> np.ndarray:
        return np.array([len(m) for m in self._members], dtype=np.intp)

    # ------------------------------------------------------------------ #
    # mutation                                                           #
    # ------------------------------------------------------------------ #
    def swap(self, i: int, j: int) -> None:
        """
        Exchange the groups of elements *i* and *j* in O(1).

        *j* takes over the slot *i* held in its group and vice versa, so
        calling ``swap(i, j)`` twice restores the exact previous state.
        """
        g1, g2 = self.labels[i], self.labels[j]
        s1, s2 = self._slot[i], self._slot[j]

        self._members[g1][s1] = j
        self._members[g2][s2] = i
        self._slot[i], self._slot[j] = s2, s1
        self.labels[i], self.labels[j] = g2, g1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(N={self.n}, K={self.k})"
