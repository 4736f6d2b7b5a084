from .catalog import Catalog
from .parameters import Parameters

__all__ = ["Catalog", "Parameters"]
