"""Community product projection entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import Field

from community_market.entities._base import Entity, utcnow


class CommunityProduct(Entity):
    """Denormalized, read-optimized copy of a product joined with its store.

    ``created_at`` is copied from the source product, not the sync time;
    ``synced_at`` records when the projection was last refreshed.
    """

    product_id: str = Field(description="Source product id, unique per projection")
    store_id: str = Field(description="Owning store id")

    # Product fields
    title: str = ""
    description: str = ""
    long_description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    images: list[str] = Field(default_factory=list)
    category: str = ""
    active: bool = True

    # Store fields
    store_slug: str = ""
    store_name: str = ""
    store_logo: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    facebook_link: str = ""
    instagram_link: str = ""
    store_active: bool = True

    synced_at: datetime = Field(default_factory=utcnow)

    def __eq__(self, other: Any) -> bool:
        """Compare projections by denormalized content, ignoring timestamps."""
        if not isinstance(other, CommunityProduct):
            return False

        return self.model_dump(exclude={"created_at", "updated_at", "synced_at"}) == (
            other.model_dump(exclude={"created_at", "updated_at", "synced_at"})
        )

    def __hash__(self) -> int:
        return hash((self.id, self.product_id, self.store_id, self.title))
