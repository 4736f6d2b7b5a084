from .dissimilarity_matrix import (
    cluster_centers,
    diversity_objective,
    get_dissimilarity_matrix,
    variance_objective,
)

__all__ = [
    "cluster_centers",
    "diversity_objective",
    "get_dissimilarity_matrix",
    "variance_objective",
]
