"""Community API router: community records, memberships and listings."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from community_market.api.http.deps import (
    get_community_product_service,
    get_community_service,
)
from community_market.api.http.errors import http_errors
from community_market.core.models.pagination import PaginatedResult
from community_market.core.models.requests import CommunityInput, MembershipInput
from community_market.core.services import CommunityProductService, CommunityService
from community_market.entities.community.community import Community
from community_market.entities.community.membership import CommunityStore
from community_market.entities.community.projection import CommunityProduct
from community_market.runtime.context import get_config

router = APIRouter(tags=["communities"])


@router.get("/communities", response_model=list[Community])
def list_communities(
    scope: Literal["all", "active", "visible"] = Query(default="all"),
    service: CommunityService = Depends(get_community_service),
) -> list[Community]:
    return service.list_communities(scope)


@router.post(
    "/communities", response_model=Community, status_code=status.HTTP_201_CREATED
)
def create_community(
    data: CommunityInput,
    service: CommunityService = Depends(get_community_service),
) -> Community:
    with http_errors():
        return service.create(data)


@router.get("/communities/{community_id}", response_model=Community)
def get_community(
    community_id: str,
    service: CommunityService = Depends(get_community_service),
) -> Community:
    with http_errors():
        return service.get_by_community_id(community_id)


@router.put(
    "/communities/{community_id}/stores/{store_id}", response_model=CommunityStore
)
def set_community_membership(
    community_id: str,
    store_id: str,
    membership: MembershipInput,
    service: CommunityService = Depends(get_community_service),
) -> CommunityStore:
    """Add a store to a community or change its membership status."""
    with http_errors():
        return service.set_membership(community_id, store_id, membership.status)


@router.get(
    "/communities/{community_id}/products",
    response_model=PaginatedResult[CommunityProduct],
)
def list_community_products(
    community_id: str,
    category: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    service: CommunityProductService = Depends(get_community_product_service),
) -> PaginatedResult[CommunityProduct]:
    """List the active products of a community's active member stores."""
    pagination = get_config().pagination
    size = min(page_size or pagination.default_page_size, pagination.max_page_size)
    with http_errors():
        return service.list_by_community_paginated(
            community_id, page, size, category=category
        )


@router.get("/community-products/{projection_id}", response_model=CommunityProduct)
def get_community_product(
    projection_id: str,
    service: CommunityProductService = Depends(get_community_product_service),
) -> CommunityProduct:
    projection = service.get_by_id(projection_id)
    if projection is None:
        raise HTTPException(status_code=404, detail="Community product not found")
    return projection
