"""
anticlust – public API
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version

from .core import (
    AllocationError,
    AntiCluster,
    DistanceExchangeAntiCluster,
    ExchangeAntiCluster,
    ExchangeConfig,
    Status,
    get_solver,
    solver_for_objective,
)
from .solvers import ExchangeResult, distance_exchange, variance_exchange

try:
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AllocationError",
    "AntiCluster",
    "DistanceExchangeAntiCluster",
    "ExchangeAntiCluster",
    "ExchangeConfig",
    "ExchangeResult",
    "Status",
    "distance_exchange",
    "get_solver",
    "solver_for_objective",
    "variance_exchange",
    "__version__",
]
