"""Community domain entity."""

from pydantic import Field

from community_market.entities._base import Entity


class Community(Entity):
    """Community entity: a curated storefront aggregating member stores.

    ``id`` is the internal identifier referenced by memberships, while
    ``community_id`` is the logical identifier exposed to clients.
    """

    community_id: str = Field(description="Logical identifier used in public URLs")
    name: str = Field(description="Community name")
    title: str = Field(default="", description="Storefront title")
    description: str = Field(default="", description="Storefront description")
    phone: str = Field(default="", description="Contact phone")
    email: str = Field(default="", description="Contact email")
    logo: str = Field(default="", description="Logo URL")
    open: bool = Field(default=True, description="Whether new stores may join")
    active: bool = Field(default=True, description="Whether the community is active")
    visible: bool = Field(default=True, description="Whether the community is listed publicly")
