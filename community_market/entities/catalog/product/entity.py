"""Product domain entity."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from community_market.entities._base import Entity


class Product(Entity):
    """Product entity representing an item a store publishes.

    This is the authoritative product record. The ``synchronized`` flag marks
    whether the community projection reflects the current state of the product;
    only the product synchronizer sets it to ``True``.
    """

    store_id: str = Field(description="Identifier of the owning store")
    title: str = Field(description="Product title")
    description: str = Field(default="", description="Short description")
    long_description: str = Field(default="", description="Long description")
    price: Decimal = Field(
        default=Decimal("0"),
        max_digits=12,
        decimal_places=2,
        description="Exact decimal price",
    )
    images: list[str] = Field(default_factory=list, description="Ordered image URLs")
    category: str = Field(default="", description="Category label")
    active: bool = Field(default=True, description="Whether the product is listed")
    synchronized: bool = Field(
        default=False, description="Whether the community projection is current"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.store_id == other.store_id
            and self.title == other.title
            and self.description == other.description
            and self.long_description == other.long_description
            and self.price == other.price
            and self.images == other.images
            and self.category == other.category
            and self.active == other.active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.store_id,
            self.title,
            self.price,
            tuple(self.images),
            self.category,
            self.active,
        ))
