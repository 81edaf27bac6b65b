from .community_product_service import CommunityProductService
from .membership_resolver import MembershipResolver

__all__ = ["CommunityProductService", "MembershipResolver"]
