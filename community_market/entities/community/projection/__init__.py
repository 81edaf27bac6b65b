"""Entity package: CommunityProduct projection."""

from .entity import CommunityProduct
from .repository import CommunityProductRepository
from .table import CommunityProductTable

__all__ = ["CommunityProduct", "CommunityProductRepository", "CommunityProductTable"]
