"""
Exchange method for anticlustering (single sweep).

Both objectives share the search loop in :class:`ExchangeHeuristic`; only the
engine that evaluates a swap differs:

* :class:`~.variance_engine.VarianceEngine` – k-means objective on features,
* :class:`~.distance_engine.DistanceEngine` – summed within-group distances.

:func:`variance_exchange` and :func:`distance_exchange` build the working
structures from plain arrays, run one sweep and write the improved labels
back into the caller's ``clusters`` array.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, Protocol, Sequence, Tuple, Union

import numpy as np

from ..core._config import Status
from ..core._errors import AllocationError
from .store import ElementStore
from .variance_engine import Probe, VarianceEngine
from .distance_engine import CategoryIndex, DistanceEngine

_LOG = logging.getLogger(__name__)


class Engine(Protocol):
    store       : ElementStore
    objectives  : np.ndarray

    @property
    def objective(self) -> float: ...
    def candidates(self, i: int): ...
    def simulate(self, i: int, j: int) -> Probe: ...
    def revert(self, i: int, j: int) -> None: ...
    def commit(self, i: int, j: int, probe: Probe) -> None: ...


@dataclass(frozen=True, slots=True)
class ExchangeResult:
    """Outcome of one exchange sweep."""
    labels              : np.ndarray
    objective           : float
    initial_objective   : float
    n_swaps             : int
    status              : Status


class ExchangeHeuristic:
    """
    Greedy single-sweep exchange search.

    For every element *i* in index order, all candidate partners in another
    group are probed. The partner giving the largest total objective is
    remembered (first one wins on ties) and the swap is committed only if
    that objective is strictly larger than the objective before *i* was
    looked at.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def solve(self) -> Tuple[np.ndarray, float, int, Status]:
        """
        Run the sweep.

        Returns
        -------
        labels : np.ndarray, shape (N,)
            Group label per element after the sweep.
        score : float
            Objective of the final partition.
        n_swaps : int
            Number of committed exchanges.
        status : Status
            ``heuristic`` if at least one exchange was committed,
            ``local_optimum`` otherwise.
        """
        engine = self.engine
        store = engine.store
        n_swaps = 0

        for i in range(store.n):
            baseline = engine.objective
            g1 = store.label(i)

            best_objective = 0.0
            best_partner: Optional[int] = None
            best_probe: Optional[Probe] = None

            for j in engine.candidates(i):
                j = int(j)
                if store.label(j) == g1:
                    continue
                probe = engine.simulate(i, j)
                if probe.total > best_objective:
                    best_objective = probe.total
                    best_partner = j
                    best_probe = probe
                engine.revert(i, j)

            if best_partner is not None and best_objective > baseline:
                engine.commit(i, best_partner, best_probe)
                n_swaps += 1
                _LOG.debug(
                    "Swapped %d <-> %d: objective %.6g -> %.6g",
                    i, best_partner, baseline, best_objective,
                )

        status = Status.heuristic if n_swaps else Status.local_optimum
        return store.labels.copy(), engine.objective, n_swaps, status


# --------------------------------------------------------------------------- #
#                          array-level entry points                           #
# --------------------------------------------------------------------------- #
def _run(build, clusters: Union[np.ndarray, List[int]]) -> ExchangeResult:
    if not isinstance(clusters, (np.ndarray, list)):
        raise TypeError(
            "clusters must be a NumPy array or a list to be written in place, "
            f"got {type(clusters).__name__}"
        )
    try:
        engine = build()
        initial = engine.objective
        labels, score, n_swaps, status = ExchangeHeuristic(engine).solve()
    except MemoryError as exc:
        _LOG.error("Failed to allocate enough memory.")
        raise AllocationError("Failed to allocate enough memory.") from exc

    if isinstance(clusters, np.ndarray):
        clusters[:] = labels
    else:
        clusters[:] = labels.tolist()
    _LOG.info(
        "Exchange sweep finished: %d swaps, objective %.6g -> %.6g",
        n_swaps, initial, score,
    )
    return ExchangeResult(
        labels=labels,
        objective=score,
        initial_objective=initial,
        n_swaps=n_swaps,
        status=status,
    )


def variance_exchange(
    data        : np.ndarray,
    clusters    : Union[np.ndarray, List[int]],
    frequencies : Optional[Sequence[int]] = None,
) -> ExchangeResult:
    """
    One exchange sweep maximising the k-means (variance) objective.

    Parameters
    ----------
    data : np.ndarray, shape (N, M)
        Feature matrix.
    clusters : np.ndarray or list of int, shape (N,)
        Initial assignment in ``0 … K-1``, as a NumPy array or a list. It is
        overwritten in place with the result and left untouched if the run
        fails. Other sequence types raise ``TypeError``.
    frequencies : array-like of int, shape (K,), optional
        Member count per group; counted from ``clusters`` when omitted.

    Raises
    ------
    AllocationError
        If the working structures cannot be allocated.
    TypeError
        If ``clusters`` cannot be written in place.
    """
    if frequencies is None:
        frequencies = np.bincount(np.asarray(clusters, dtype=np.intp))

    def build() -> VarianceEngine:
        return VarianceEngine(ElementStore(clusters, frequencies), data)

    return _run(build, clusters)


def distance_exchange(
    distances               : np.ndarray,
    clusters                : Union[np.ndarray, List[int]],
    frequencies             : Optional[Sequence[int]] = None,
    *,
    use_categories          : bool = False,
    categories              : Optional[Sequence[int]] = None,
    category_frequencies    : Optional[Sequence[int]] = None,
) -> ExchangeResult:
    """
    One exchange sweep maximising the summed within-group distances.

    Parameters
    ----------
    distances : np.ndarray, shape (N, N)
        Dissimilarity matrix with zero diagonal.
    clusters : np.ndarray or list of int, shape (N,)
        Initial assignment, overwritten in place like in :func:`variance_exchange`.
    frequencies : array-like of int, shape (K,), optional
        Member count per group; counted from ``clusters`` when omitted.
    use_categories : bool
        Only exchange elements that share a category label.
    categories : array-like of int, shape (N,), optional
        Category label per element in ``0 … C-1``; required if
        ``use_categories`` is set, ignored otherwise.
    category_frequencies : array-like of int, shape (C,), optional
        Elements per category; counted from ``categories`` when omitted.

    Raises
    ------
    AllocationError
        If the working structures cannot be allocated.
    TypeError
        If ``clusters`` cannot be written in place.
    """
    if frequencies is None:
        frequencies = np.bincount(np.asarray(clusters, dtype=np.intp))
    if use_categories and categories is None:
        raise ValueError("use_categories=True requires a categories array")

    def build() -> DistanceEngine:
        store = ElementStore(clusters, frequencies)
        index = (
            CategoryIndex(store.n, categories, category_frequencies)
            if use_categories
            else CategoryIndex(store.n)
        )
        return DistanceEngine(store, distances, index)

    return _run(build, clusters)
