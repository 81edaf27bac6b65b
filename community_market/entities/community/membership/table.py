"""Community-store membership table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from community_market.entities._base import EntityTable


class CommunityStoreTable(EntityTable, table=True):
    """Many-to-many membership between communities and stores."""

    __tablename__ = "community_stores"
    __table_args__ = (
        UniqueConstraint("community_id", "store_id", name="uq_community_store"),
    )

    community_id: str = Field(index=True)
    store_id: str = Field(index=True)
    status: bool = True
