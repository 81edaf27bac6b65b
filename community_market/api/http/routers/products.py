"""Product API router: mutations re-synchronize the community projection."""

from fastapi import APIRouter, Depends, Query, status

from community_market.api.http.deps import get_product_service
from community_market.api.http.errors import http_errors
from community_market.core.models.pagination import PaginatedResult
from community_market.core.models.requests import ImageInput, ImageOrderInput, ProductInput
from community_market.core.services import ProductService
from community_market.entities.catalog.product import Product
from community_market.runtime.context import get_config

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=PaginatedResult[Product])
def list_products(
    category: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    service: ProductService = Depends(get_product_service),
) -> PaginatedResult[Product]:
    """List active products across all stores, newest first."""
    pagination = get_config().pagination
    size = min(page_size or pagination.default_page_size, pagination.max_page_size)
    with http_errors():
        return service.list_paginated(page, size, category=category)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductInput,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a product and publish it to the community projection."""
    return service.create(data)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.get(product_id)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    data: ProductInput,
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.update(product_id, data)


@router.post("/{product_id}/images", response_model=Product)
def add_product_image(
    product_id: str,
    image: ImageInput,
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.add_image(product_id, image.url)


@router.delete("/{product_id}/images", response_model=Product)
def remove_product_image(
    product_id: str,
    url: str = Query(..., description="URL of the image to remove"),
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.remove_image(product_id, url)


@router.put("/{product_id}/images/order", response_model=Product)
def reorder_product_images(
    product_id: str,
    order: ImageOrderInput,
    service: ProductService = Depends(get_product_service),
) -> Product:
    with http_errors():
        return service.reorder_images(product_id, order.images)
