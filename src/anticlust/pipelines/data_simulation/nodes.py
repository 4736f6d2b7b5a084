# pipelines/data_simulation/nodes.py
import numpy as np
import pandas as pd
from typing import List, Dict
import logging

_LOG = logging.getLogger(__name__)


def simulate_matrices(
    n_values: List[int],
    n_features: int,
    n_categories: int,
    rng_seed: int,
) -> Dict[str, pd.DataFrame]:
    """
    Generate one N×F matrix per N and return **one dict**.

    Features are standard normal and named ``x0 … x{F-1}``. With
    ``n_categories > 0`` a ``category`` column with uniformly drawn labels
    ``0 … n_categories-1`` is added.

    Returns
    -------
    data : dict
        Keys are strings "N_<value>", e.g. "N_10"; values are DataFrames.
    """
    rng = np.random.default_rng(rng_seed)
    data = {}

    for N in n_values:
        arr = rng.standard_normal(size=(N, n_features))
        df = pd.DataFrame(arr, columns=[f"x{j}" for j in range(n_features)])
        if n_categories:
            df["category"] = rng.integers(0, n_categories, size=N)
        data[f"N_{N}"] = df

    _LOG.info("Simulated %d matrices with %d features", len(data), n_features)
    return data
