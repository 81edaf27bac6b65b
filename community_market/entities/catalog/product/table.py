"""Product database table model."""

from decimal import Decimal

from sqlalchemy import JSON, Column
from sqlmodel import Field

from community_market.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    store_id: str = Field(index=True)
    title: str
    description: str = ""
    long_description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    images: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    category: str = Field(default="", index=True)
    active: bool = Field(default=True, index=True)
    synchronized: bool = Field(default=False, index=True)
