"""Store API router."""

from fastapi import APIRouter, Depends, status

from community_market.api.http.deps import get_store_service
from community_market.api.http.errors import http_errors
from community_market.core.models.requests import StoreInput
from community_market.core.models.responses import StoreUpdateResponse
from community_market.core.services import StoreService
from community_market.entities.catalog.store import Store

router = APIRouter(prefix="/stores", tags=["stores"])


@router.post("", response_model=Store, status_code=status.HTTP_201_CREATED)
def create_store(
    data: StoreInput,
    service: StoreService = Depends(get_store_service),
) -> Store:
    with http_errors():
        return service.create(data)


@router.get("/by-slug/{slug}", response_model=Store)
def get_store_by_slug(
    slug: str,
    service: StoreService = Depends(get_store_service),
) -> Store:
    with http_errors():
        return service.get_by_slug(slug)


@router.get("/{store_id}", response_model=Store)
def get_store(
    store_id: str,
    service: StoreService = Depends(get_store_service),
) -> Store:
    with http_errors():
        return service.get(store_id)


@router.put("/{store_id}", response_model=StoreUpdateResponse)
def update_store(
    store_id: str,
    data: StoreInput,
    service: StoreService = Depends(get_store_service),
) -> StoreUpdateResponse:
    """Update a store profile and refresh the projections of its products."""
    with http_errors():
        store, synchronized = service.update(store_id, data)
    return StoreUpdateResponse(store=store, synchronized=synchronized)
