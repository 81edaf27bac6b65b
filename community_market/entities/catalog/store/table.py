"""Store database table model."""

from sqlmodel import Field

from community_market.entities._base import EntityTable


class StoreTable(EntityTable, table=True):
    """Database persistence model for store profiles."""

    __tablename__ = "stores"

    name: str
    slug: str = Field(unique=True, index=True)
    logo: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    facebook: str = ""
    instagram: str = ""
    active: bool = True
