"""Community-store membership entity."""

from pydantic import Field

from community_market.entities._base import Entity


class CommunityStore(Entity):
    """Association granting a store's products visibility within a community."""

    community_id: str = Field(description="Internal id of the community")
    store_id: str = Field(description="Identifier of the member store")
    status: bool = Field(default=True, description="Whether the membership is active")
