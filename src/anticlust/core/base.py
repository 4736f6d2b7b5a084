from __future__ import annotations          # <- future-proof typing
from abc import ABC, abstractmethod
import logging
import numpy as np

from ._config import BaseConfig, Status

_LOG = logging.getLogger(__name__)


class AntiCluster(ABC):
    """Common interface for all anticlustering solvers."""

    def __init__(self, config: BaseConfig):
        self.config         : BaseConfig                = config
        self._labels        : np.ndarray    | None      = None
        self._score         : float         | None      = None
        self._initial_score : float         | None      = None
        self._runtime       : float         | None      = None
        self._status        : Status        | None      = None
        self._n_swaps       : int           | None      = None

    @abstractmethod
    def fit(self, X: np.ndarray | None = None, *, D: np.ndarray | None = None, **kwargs):
        """
        Compute the partition in-place.  Either *X* **or** a
        pre-computed distance matrix *D* must be supplied.
        """
        ...

    def fit_predict(self, *args, **kwargs) -> np.ndarray:
        self.fit(*args, **kwargs)
        return self.labels_

    # ____________ Properties for easy access ____________
    @property
    def labels_(self) -> np.ndarray:
        if self._labels is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._labels

    @property
    def score_(self) -> float:
        """Objective value of the final partition."""
        if self._score is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._score

    @property
    def initial_score_(self) -> float:
        """Objective value of the partition the sweep started from."""
        if self._initial_score is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._initial_score

    @property
    def runtime_(self) -> float:
        if self._runtime is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._runtime

    @property
    def status_(self) -> str:
        """Status of the solver after fitting."""
        if self._status is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._status.value

    @property
    def n_swaps_(self) -> int:
        """Number of exchanges committed during the sweep."""
        if self._n_swaps is None:
            raise RuntimeError("Call `.fit()` first!")
        return self._n_swaps

    # ------------ internal helpers (for subclasses) ------------------- #
    def _set_labels(self, labels: np.ndarray):
        """Store a 1-D vector of length *N* with cluster indices 0…K-1."""
        _LOG.debug("Labels set to %s", labels)

        if labels.ndim != 1:
            raise ValueError("labels must be a 1-D array")
        if not np.issubdtype(labels.dtype, np.integer):
            raise TypeError("labels must contain integers")

        low, high = labels.min(initial=0), labels.max(initial=-1)
        if low < 0 or high >= self.config.n_clusters:
            raise ValueError("labels outside the expected 0…K-1 range. "
                             f"Values range: {low}...{high}")

        self._labels = labels

    def _set_score(self, score: float, initial: float | None = None):
        if not isinstance(score, (int, float)):
            raise TypeError("score must be numeric")
        self._score = float(score)
        if initial is not None:
            self._initial_score = float(initial)

    def _set_runtime(self, runtime: float):
        if not isinstance(runtime, (int, float)):
            raise TypeError("runtime must be numeric")
        self._runtime = float(runtime) if runtime >= 0 else np.nan

    def _set_status(self, status: Status | str, n_swaps: int | None = None):
        if not isinstance(status, Status):
            status = Status.from_string(status)
        self._status = status
        if n_swaps is not None:
            self._n_swaps = int(n_swaps)

    # ------------------------------------------------------------------ #
    # nice string representation                                         #
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        cls = self.__class__.__name__
        lab = "unfitted" if self._labels is None else "fitted"
        return f"{cls}(K={self.config.n_clusters}, status={lab})"


__all__ = [
    "BaseConfig",
    "AntiCluster",
]
