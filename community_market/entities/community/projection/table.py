"""Community product projection table model."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, Column
from sqlmodel import Field

from community_market.entities._base import EntityTable, utcnow


class CommunityProductTable(EntityTable, table=True):
    """Materialized community listing row.

    ``product_id`` carries a unique index: the upsert keys on it, so
    concurrent syncs of one product converge on a single row.
    """

    __tablename__ = "community_products"

    product_id: str = Field(unique=True, index=True)
    store_id: str = Field(index=True)

    title: str = ""
    description: str = ""
    long_description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    images: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    category: str = Field(default="", index=True)
    active: bool = Field(default=True, index=True)

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
