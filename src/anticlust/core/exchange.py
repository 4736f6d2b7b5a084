"""
Exchange-method solvers exposed through the solver registry.

* ``"exchange"``          – k-means (variance) objective on a feature matrix.
* ``"distance_exchange"`` – summed within-group distances, optionally with
  categorical restrictions on the exchange partners.

Both run exactly one sweep of :class:`~anticlust.solvers.ExchangeHeuristic`
from one start partition; repeated runs from different starts are up to the
caller.
"""
from __future__ import annotations

import logging
import time
from typing import Optional, Sequence, Tuple

import numpy as np

from .base import AntiCluster
from ._registry import get_solver, register_solver
from ._config import ExchangeConfig
from ..solvers.exchange_heuristic import ExchangeResult, distance_exchange, variance_exchange
from ..metrics.dissimilarity_matrix import get_dissimilarity_matrix
from ..preprocessing.inputs import (
    as_distance_matrix,
    as_feature_matrix,
    categorical_labels,
    encode_categories,
    frequencies_from_labels,
    random_labels,
    validate_labels,
)


_LOG = logging.getLogger(__name__)


class _ExchangeSolver(AntiCluster):
    """Shared bookkeeping of the two exchange solvers."""

    objective: str

    def __init__(self, config: ExchangeConfig):
        super().__init__(config)
        self.cfg                    : ExchangeConfig            = config
        self._result                : Optional[ExchangeResult]  = None
        self._initial_labels        : Optional[np.ndarray]      = None

    @property
    def initial_labels_(self) -> np.ndarray:
        """The start partition of the sweep (drawn at random unless supplied)."""
        if self._initial_labels is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._initial_labels

    # ------------------------------------------------------------------ #
    # helpers                                                            #
    # ------------------------------------------------------------------ #
    def _check_objective(self) -> None:
        if self.cfg.objective is not None and self.cfg.objective != self.objective:
            raise ValueError(
                f"{self.__class__.__name__} maximises the {self.objective} objective, "
                f"but the config asks for '{self.cfg.objective}'"
            )

    def _start_partition(
        self,
        N               : int,
        initial_labels  : Optional[Sequence[int]],
        categories      : Optional[np.ndarray] = None,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(labels, sizes)`` the sweep starts from."""
        K = self.cfg.n_clusters

        if initial_labels is not None and self.cfg.group_sizes is None:
            # sizes are whatever the supplied partition has
            self.cfg.validate(N, equal_sizes=False)
            labels = validate_labels(initial_labels, N, K)
            sizes = frequencies_from_labels(labels, K)
            if (sizes == 0).any():
                raise ValueError(f"initial labels leave groups empty: sizes {sizes.tolist()}")
            return labels, sizes

        self.cfg.validate(N)
        sizes = self.cfg.sizes(N)
        if initial_labels is not None:
            return validate_labels(initial_labels, N, K, sizes), sizes
        if categories is not None:
            return categorical_labels(categories, sizes, self.cfg.random_state), sizes
        return random_labels(sizes, self.cfg.random_state), sizes

    def _store_result(self, start: np.ndarray, result: ExchangeResult, runtime: float) -> None:
        self._result = result
        self._initial_labels = start
        self._set_labels(result.labels)
        self._set_score(result.objective, initial=result.initial_objective)
        self._set_status(result.status, n_swaps=result.n_swaps)
        self._set_runtime(runtime)
        _LOG.info(
            "%s finished in %.3f s: objective %.6g -> %.6g (%d swaps)",
            self.__class__.__name__, runtime,
            result.initial_objective, result.objective, result.n_swaps,
        )


@register_solver("exchange")
class ExchangeAntiCluster(_ExchangeSolver):
    """
    k-means anticlustering: maximise the summed squared distances of the
    elements to their group centroids.

    Example
    -------
    >>> cfg = ExchangeConfig(n_clusters=2, random_state=1)
    >>> labels = ExchangeAntiCluster(cfg).fit_predict(X)
    """

    objective = "variance"

    def fit(
            self,
            X: Optional[np.ndarray] = None,
            *,
            D: Optional[np.ndarray] = None,
            initial_labels: Optional[Sequence[int]] = None,
        ) -> "ExchangeAntiCluster":
        """
        Parameters
        ----------
        X : array-like, shape (N, M)
            Feature matrix. Required; the variance objective needs features.
        D : ignored
            Present only to satisfy the base-class signature.
        initial_labels : array-like of int, shape (N,), optional
            Start partition. Without it a random size-valid partition is drawn
            from ``config.random_state``.
        """
        self._check_objective()
        if X is None:
            raise ValueError("The variance objective needs a feature matrix X.")
        if D is not None:
            _LOG.warning("D is ignored by %s; centroids are computed from X", self.__class__.__name__)

        X = as_feature_matrix(X, standardize=self.cfg.standardize)
        N = X.shape[0]
        start, sizes = self._start_partition(N, initial_labels)

        _LOG.info("Starting exchange anticlustering (variance): N=%d, K=%d", N, self.cfg.n_clusters)
        clusters = start.copy()
        t0 = time.perf_counter()
        result = variance_exchange(X, clusters, sizes)
        runtime = time.perf_counter() - t0

        self._store_result(start, result, runtime)
        return self


@register_solver("distance_exchange")
class DistanceExchangeAntiCluster(_ExchangeSolver):
    """
    Anticluster editing: maximise the summed pairwise distances within groups.

    When ``categories`` are passed to :meth:`fit`, a random start partition
    spreads each category evenly over the groups, and with
    ``config.use_categories`` (the default) elements are only exchanged with
    elements of the same category.
    """

    objective = "diversity"

    def fit(
            self,
            X: Optional[np.ndarray] = None,
            *,
            D: Optional[np.ndarray] = None,
            initial_labels: Optional[Sequence[int]] = None,
            categories: Optional[Sequence] = None,
        ) -> "DistanceExchangeAntiCluster":
        """
        Parameters
        ----------
        X : array-like, shape (N, M), optional
            Feature matrix, turned into distances with ``config.metric``.
        D : array-like, shape (N, N), optional
            Precomputed dissimilarities; takes precedence over *X*.
        initial_labels : array-like of int, shape (N,), optional
            Start partition.
        categories : array-like, shape (N,), optional
            Category per element (any hashable values).
        """
        self._check_objective()
        if X is None and D is None:
            raise ValueError("Either X or D must be provided.")

        if D is None:
            X = as_feature_matrix(X, standardize=self.cfg.standardize)
            D = get_dissimilarity_matrix(X, self.cfg.metric)
            _LOG.debug("Dissimilarity matrix computed with shape %s", D.shape)
        else:
            D = as_distance_matrix(D)
        N = D.shape[0]

        codes = None
        if categories is not None:
            codes, n_categories = encode_categories(categories, N)
            _LOG.debug("Start partition stratified by %d categories", n_categories)
        start, sizes = self._start_partition(N, initial_labels, codes)
        restrict = codes is not None and self.cfg.use_categories

        _LOG.info(
            "Starting exchange anticlustering (distance): N=%d, K=%d, categories=%s",
            N, self.cfg.n_clusters, restrict,
        )
        clusters = start.copy()
        t0 = time.perf_counter()
        result = distance_exchange(
            D, clusters, sizes,
            use_categories=restrict,
            categories=codes,
        )
        runtime = time.perf_counter() - t0

        self._store_result(start, result, runtime)
        return self


_SOLVER_FOR_OBJECTIVE = {
    ExchangeAntiCluster.objective         : "exchange",
    DistanceExchangeAntiCluster.objective : "distance_exchange",
}


def solver_for_objective(config: ExchangeConfig) -> _ExchangeSolver:
    """
    Instantiate the registered exchange solver that maximises ``config.objective``.

    Raises
    ------
    ValueError
        If ``config.objective`` is unset or unknown.
    """
    try:
        name = _SOLVER_FOR_OBJECTIVE[config.objective]
    except KeyError as exc:
        raise ValueError(
            f"config.objective must be one of {list(_SOLVER_FOR_OBJECTIVE)}, "
            f"got {config.objective!r}"
        ) from exc
    return get_solver(name, config=config)
