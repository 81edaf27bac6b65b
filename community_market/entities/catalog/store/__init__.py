"""Entity package: Store."""

from .entity import Store
from .repository import StoreRepository
from .table import StoreTable

__all__ = ["Store", "StoreRepository", "StoreTable"]
