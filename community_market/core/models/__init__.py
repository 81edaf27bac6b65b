from .pagination import PaginatedResult, Pagination, ProjectionFilter
from .requests import (
    CommunityInput,
    ImageInput,
    ImageOrderInput,
    MembershipInput,
    ProductInput,
    StoreInput,
)

__all__ = [
    "CommunityInput",
    "ImageInput",
    "ImageOrderInput",
    "MembershipInput",
    "PaginatedResult",
    "Pagination",
    "ProductInput",
    "ProjectionFilter",
    "StoreInput",
]
