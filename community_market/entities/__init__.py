"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Catalog entities (products, stores) are the authoritative records. Community
entities hold communities, their store memberships and the denormalized
community product projection derived from the catalog.
"""

from .catalog.product import Product, ProductRepository, ProductTable
from .catalog.store import Store, StoreRepository, StoreTable
from .community.community import Community, CommunityRepository, CommunityTable
from .community.membership import (
    CommunityStore,
    CommunityStoreRepository,
    CommunityStoreTable,
)
from .community.projection import (
    CommunityProduct,
    CommunityProductRepository,
    CommunityProductTable,
)

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "Store",
    "StoreTable",
    "StoreRepository",
    "Community",
    "CommunityTable",
    "CommunityRepository",
    "CommunityStore",
    "CommunityStoreTable",
    "CommunityStoreRepository",
    "CommunityProduct",
    "CommunityProductTable",
    "CommunityProductRepository",
]
