"""Maintenance endpoints that trigger product synchronization."""

from fastapi import APIRouter, Depends, HTTPException

from community_market.api.http.deps import (
    get_product_reconciler,
    get_product_synchronizer,
)
from community_market.core.models.responses import BatchSyncResponse, ProductSyncResponse
from community_market.core.services import ProductReconciler, ProductSynchronizer

router = APIRouter(prefix="/sync", tags=["sync"])


@router.post("/products/{product_id}", response_model=ProductSyncResponse)
def sync_product(
    product_id: str,
    synchronizer: ProductSynchronizer = Depends(get_product_synchronizer),
) -> ProductSyncResponse:
    """Synchronize one product; 404 when the product or its store is missing."""
    if not synchronizer.sync_product(product_id):
        raise HTTPException(status_code=404, detail="Product or store not found; nothing to sync")
    return ProductSyncResponse(product_id=product_id, synchronized=True)


@router.post("/products", response_model=BatchSyncResponse)
def sync_unsynchronized_products(
    reconciler: ProductReconciler = Depends(get_product_reconciler),
) -> BatchSyncResponse:
    """Synchronize every active product still pending."""
    return BatchSyncResponse(synchronized=reconciler.sync_all_unsynchronized())


@router.post("/stores/{store_id}", response_model=BatchSyncResponse)
def sync_store_products(
    store_id: str,
    reconciler: ProductReconciler = Depends(get_product_reconciler),
) -> BatchSyncResponse:
    """Re-synchronize all active products of one store."""
    return BatchSyncResponse(
        synchronized=reconciler.sync_products_by_store(store_id), store_id=store_id
    )
