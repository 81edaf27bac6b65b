"""Response models returned by the HTTP layer."""

from pydantic import BaseModel

from community_market.entities.catalog.store import Store


class ProductSyncResponse(BaseModel):
    product_id: str
    synchronized: bool


class BatchSyncResponse(BaseModel):
    synchronized: int
    store_id: str | None = None


class StoreUpdateResponse(BaseModel):
    store: Store
    synchronized: int
