from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from ..metrics.dissimilarity_matrix import METRICS as _METRICS

_OBJECTIVES = ("variance", "diversity")


@dataclass(slots=True)
class BaseConfig:
    """Generic knobs that *any* anticlustering solver may use.

    Concrete subclasses extend this dataclass (see :class:`ExchangeConfig`).
    """
    n_clusters: int
    random_state: Optional[int] = None


@dataclass(slots=True)
class ExchangeConfig(BaseConfig):
    """
    Tunable parameters for the exchange solvers. Inherits from :class:`BaseConfig`.

    Notes
    -----
    * ``group_sizes`` fixes the member count of every group. When omitted all
      groups get ``N / K`` members, so *N* must be divisible by *K*.
    * ``standardize`` scales every feature to zero mean and unit variance
      before the distance matrix or the centroids are computed. It is ignored
      when a precomputed distance matrix is passed to ``fit``.
    * ``metric`` is only used when the distance variant derives its matrix
      from a feature matrix.
    * ``objective`` names the criterion to maximise. ``None`` accepts whatever
      the chosen solver optimises; a set value must match it, and
      :func:`~anticlust.core.exchange.solver_for_objective` picks the solver
      from it.
    * ``use_categories`` restricts exchange partners to elements of the same
      category whenever categories are passed to ``fit``. With ``False`` the
      categories only stratify a random start partition.
    """
    n_clusters      : int                       = 2
    group_sizes     : Optional[Sequence[int]]   = None
    standardize     : bool                      = False
    metric          : str                       = "euclidean"
    objective       : Optional[str]             = None
    use_categories  : bool                      = True

    # guard rails ------------------------------------------------------------

    def validate(self, n_items: int, *, equal_sizes: bool = True) -> None:
        """
        Raise ``ValueError`` if the configuration cannot partition *n_items*.

        ``equal_sizes=False`` skips the divisibility check, for callers that
        take the group sizes from a supplied initial assignment.
        """
        if self.n_clusters <= 1:
            raise ValueError("n_clusters must be >= 2")
        if self.metric not in _METRICS:
            raise ValueError(
                f"Unsupported metric '{self.metric}'. Valid choices: {', '.join(_METRICS)}"
            )
        if self.objective is not None and self.objective not in _OBJECTIVES:
            raise ValueError(
                f"Unsupported objective '{self.objective}'. Valid choices: {', '.join(_OBJECTIVES)}"
            )
        if self.group_sizes is None:
            if equal_sizes and n_items % self.n_clusters:
                raise ValueError(
                    f"Number of items {n_items} not divisible by K={self.n_clusters}."
                )
            return
        sizes = np.asarray(self.group_sizes)
        if sizes.ndim != 1 or len(sizes) != self.n_clusters:
            raise ValueError(
                f"group_sizes must have one entry per cluster (K={self.n_clusters}), "
                f"got {list(self.group_sizes)}"
            )
        if (sizes < 1).any():
            raise ValueError("every group needs at least one member")
        if sizes.sum() != n_items:
            raise ValueError(
                f"group_sizes sum to {int(sizes.sum())}, but there are {n_items} items."
            )

    def sizes(self, n_items: int) -> np.ndarray:
        """Member count per group after :meth:`validate` has passed."""
        if self.group_sizes is None:
            return np.full(self.n_clusters, n_items // self.n_clusters, dtype=np.intp)
        return np.asarray(self.group_sizes, dtype=np.intp)


class Status(str, Enum):
    """Solver status codes used across the anticlust package."""

    heuristic     = "heuristic"      # sweep committed at least one swap
    local_optimum = "local_optimum"  # no exchange improved the start partition

    # -------- convenience helpers ------------------------------------
    @classmethod
    def from_string(cls, value: str) -> "Status":
        """Coerce an arbitrary string into a Status enum (raises on unknown)."""
        try:
            return cls(value)
        except ValueError as exc:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown status '{value}'. Valid choices: {valid}") from exc

    @classmethod
    def choices(cls) -> list[str]:
        """Return the plain-string choices."""
        return [m.value for m in cls]
