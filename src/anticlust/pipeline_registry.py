"""Project pipelines."""

from kedro.pipeline import Pipeline

from anticlust.pipelines.data_simulation import create_pipeline as data_simulation_pl
from anticlust.pipelines.anticluster import create_pipeline as anticluster_pl


def register_pipelines() -> dict[str, Pipeline]:
    """Register the project's pipelines.

    Returns:
        A mapping from pipeline names to ``Pipeline`` objects.
    """
    data_simulation = data_simulation_pl()
    anticluster = anticluster_pl()

    # Simulate matrices, then run every configured exchange solver once on each.
    return {
        "data_simulation": data_simulation,
        "anticluster": anticluster,
        "__default__": data_simulation + anticluster,
    }
