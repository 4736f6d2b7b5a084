# src/anticlust/constants/parameters.py
class Parameters:
    """String constants for YAML parameter paths."""

    class DataSimulation:
        N_VALUES       = "params:simulation.n_values"
        NUM_FEATURES   = "params:simulation.n_features"
        NUM_CATEGORIES = "params:simulation.n_categories"  # 0 ⇒ no category column
        RNG_SEED       = "params:simulation.rng_seed"

    class Anticluster:
        K              = "params:anticluster.k"
        SOLVERS        = "params:anticluster.solvers"           # list of dicts
        RNG_SEED       = "params:anticluster.rng_seed"          # start partitions
