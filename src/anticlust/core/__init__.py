from ._config import BaseConfig, ExchangeConfig, Status
from ._errors import AllocationError
from ._registry import available_solvers, get_solver, register_solver
from .base import AntiCluster
from .exchange import DistanceExchangeAntiCluster, ExchangeAntiCluster, solver_for_objective

__all__ = [
    "AllocationError",
    "AntiCluster",
    "BaseConfig",
    "DistanceExchangeAntiCluster",
    "ExchangeAntiCluster",
    "ExchangeConfig",
    "Status",
    "available_solvers",
    "get_solver",
    "register_solver",
    "solver_for_objective",
]
