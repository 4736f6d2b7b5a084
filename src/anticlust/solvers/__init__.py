"""Exchange-method core: membership store, objective engines and the sweep."""
from .store import ElementStore
from .variance_engine import Probe, VarianceEngine
from .distance_engine import CategoryIndex, DistanceEngine
from .exchange_heuristic import (
    ExchangeHeuristic,
    ExchangeResult,
    distance_exchange,
    variance_exchange,
)

__all__ = [
    "ElementStore",
    "Probe",
    "VarianceEngine",
    "CategoryIndex",
    "DistanceEngine",
    "ExchangeHeuristic",
    "ExchangeResult",
    "distance_exchange",
    "variance_exchange",
]
