"""Core services exports."""

# Catalog Services
from .catalog import CommunityService, ProductService, StoreService

# Community Listing Services
from .community import CommunityProductService, MembershipResolver

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Synchronization Services
from .sync import ProductReconciler, ProductSynchronizer, ReconcileReport

__all__ = [
    # Catalog Services
    "CommunityService",
    "ProductService",
    "StoreService",
    # Community Listing Services
    "CommunityProductService",
    "MembershipResolver",
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Synchronization Services
    "ProductReconciler",
    "ProductSynchronizer",
    "ReconcileReport",
]
