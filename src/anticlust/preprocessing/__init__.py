from .inputs import (
    as_distance_matrix,
    as_feature_matrix,
    categorical_labels,
    encode_categories,
    frequencies_from_labels,
    random_labels,
    validate_labels,
)

__all__ = [
    "as_distance_matrix",
    "as_feature_matrix",
    "categorical_labels",
    "encode_categories",
    "frequencies_from_labels",
    "random_labels",
    "validate_labels",
]
