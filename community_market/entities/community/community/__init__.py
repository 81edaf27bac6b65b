"""Entity package: Community."""

from .entity import Community
from .repository import CommunityRepository
from .table import CommunityTable

__all__ = ["Community", "CommunityRepository", "CommunityTable"]
