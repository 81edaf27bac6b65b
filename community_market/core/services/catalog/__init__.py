from .community_service import CommunityService
from .product_service import ProductService
from .store_service import StoreService

__all__ = ["CommunityService", "ProductService", "StoreService"]
