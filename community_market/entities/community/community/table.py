"""Community database table model."""

from sqlmodel import Field

from community_market.entities._base import EntityTable


class CommunityTable(EntityTable, table=True):
    """Database persistence model for communities."""

    __tablename__ = "communities"

    community_id: str = Field(unique=True, index=True)
    name: str
    title: str = ""
    description: str = ""
    phone: str = ""
    email: str = ""
    logo: str = ""
    open: bool = True
    active: bool = True
    visible: bool = True
