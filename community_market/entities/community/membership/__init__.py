"""Entity package: CommunityStore membership."""

from .entity import CommunityStore
from .repository import CommunityStoreRepository
from .table import CommunityStoreTable

__all__ = ["CommunityStore", "CommunityStoreRepository", "CommunityStoreTable"]
