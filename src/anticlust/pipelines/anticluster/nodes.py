import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ...core import ExchangeConfig, get_solver, solver_for_objective
from ...metrics.dissimilarity_matrix import (
    diversity_objective,
    get_dissimilarity_matrix,
    variance_objective,
)
from ...preprocessing.inputs import categorical_labels, encode_categories, random_labels

_LOG = logging.getLogger(__name__)

_SOLVER_NAME = {
    "variance"  : "exchange",
    "diversity" : "distance_exchange",
}


def _true_score(objective: str, X: np.ndarray, labels: np.ndarray, metric: str) -> float:
    if objective == "variance":
        return variance_objective(X, labels)
    return diversity_objective(get_dissimilarity_matrix(X, metric), labels)


def benchmark_exchange(
    data            : Dict[str, pd.DataFrame],
    n_clusters      : int,
    solvers         : List[Dict[str, Any]],
    rng_seed        : int,
) -> pd.DataFrame:
    """
    Run every configured solver once on every simulated matrix in *data*.

    All solvers on the same matrix start from the same random partition, so
    their ``score_before`` columns agree per objective. Matrices whose size
    is not divisible by *n_clusters* are skipped.

    Parameters
    ----------
    data : dict
        ``"N_<n>"`` → DataFrame with feature columns ``x*`` and an optional
        ``category`` column.
    n_clusters : int
    solvers : list of dict
        Each entry names its solver either by ``solver_name`` (``"exchange"``
        or ``"distance_exchange"``) or by ``objective`` (``"variance"`` or
        ``"diversity"``). All other keys are :class:`ExchangeConfig` fields;
        ``use_categories`` defaults to ``False`` here.
    rng_seed : int
        Seed of the start partitions.

    Returns
    -------
    table : DataFrame
        Columns = [N, solver, objective, score_before, score_after,
        improvement, n_swaps, runtime, status]
    """
    rng = np.random.default_rng(rng_seed)
    rows: List[Dict[str, Any]] = []

    for key, df in data.items():          # key = "N_10", df = DataFrame
        N = int(key.split("_")[1])
        if N % n_clusters:
            _LOG.warning("Skipping %s: N=%d not divisible by K=%d", key, N, n_clusters)
            continue

        X = df.filter(regex=r"^x\d+$").to_numpy(dtype=float)
        sizes = np.full(n_clusters, N // n_clusters)
        codes = None
        if "category" in df:
            codes, _ = encode_categories(df["category"].to_numpy(), N)
            start = categorical_labels(codes, sizes, rng)
        else:
            start = random_labels(sizes, rng)

        for entry in solvers:
            params = {k: v for k, v in entry.items() if k != "solver_name"}
            params.setdefault("use_categories", False)
            cfg = ExchangeConfig(n_clusters=n_clusters, **params)

            if "solver_name" in entry:
                solver = get_solver(entry["solver_name"], config=cfg)
            else:
                solver = solver_for_objective(cfg)
            objective = solver.objective
            name = _SOLVER_NAME[objective]

            fit_kwargs: Dict[str, Any] = {"initial_labels": start}
            if cfg.use_categories:
                if objective != "diversity":
                    raise ValueError(f"Categorical restrictions are not supported by {name}")
                if codes is None:
                    raise ValueError(f"{name} asks for categories, but {key} has no 'category' column")
                fit_kwargs["categories"] = codes
            solver.fit(X, **fit_kwargs)

            # Check the running objective against a from-scratch evaluation:
            if not cfg.standardize:
                true_score = _true_score(objective, X, solver.labels_, cfg.metric)
                if not np.isclose(true_score, solver.score_):
                    _LOG.warning(
                        "Solver %s returned a score of %.6g, but the true score is %.6g.",
                        name, solver.score_, true_score,
                    )

            rows.append(dict(
                N=N,
                solver=name + ("+categories" if cfg.use_categories else ""),
                objective=objective,
                score_before=solver.initial_score_,
                score_after=solver.score_,
                improvement=solver.score_ - solver.initial_score_,
                n_swaps=solver.n_swaps_,
                runtime=solver.runtime_,
                status=solver.status_,
            ))

    table = pd.DataFrame(
        rows,
        columns=["N", "solver", "objective", "score_before", "score_after",
                 "improvement", "n_swaps", "runtime", "status"],
    )
    return table.sort_values(["N", "solver"]).reset_index(drop=True)
