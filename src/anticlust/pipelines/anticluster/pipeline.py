from kedro.pipeline import Pipeline, node

from ...constants import Parameters as P, Catalog as C
from .nodes import benchmark_exchange


def create_pipeline(**kwargs):
    """
    One-node pipeline:
        Input  : simulated data dict
        Output : benchmark table (one row per matrix and solver)
    """
    return Pipeline(
        [
            node(
                func=benchmark_exchange,
                inputs=[
                    C.Data.SIM_DATA,                      # dict of DataFrames
                    P.Anticluster.K,                      # n_clusters
                    P.Anticluster.SOLVERS,
                    P.Anticluster.RNG_SEED,
                ],
                outputs=C.Reporting.EXCHANGE_TABLE,
                name="benchmark_exchange_solvers",
            ),
        ]
    )
