"""Store domain entity."""

from typing import Any

from pydantic import Field, field_validator

from community_market.entities._base import Entity


class Store(Entity):
    """Store entity representing a seller's public profile.

    The slug is the store's public link; it is normalized to lowercase and
    must be globally unique.
    """

    name: str = Field(description="Store display name")
    slug: str = Field(description="Public link, lowercase and unique")
    logo: str = Field(default="", description="Logo URL")
    phone: str = Field(default="", description="Contact phone")
    email: str = Field(default="", description="Contact email")
    website: str = Field(default="", description="Website URL")
    facebook: str = Field(default="", description="Facebook link")
    instagram: str = Field(default="", description="Instagram link")
    active: bool = Field(default=True, description="Whether the store is active")

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, value: str) -> str:
        return value.strip().lower()

    def __eq__(self, other: Any) -> bool:
        """Compare stores by business attributes, ignoring timestamps."""
        if not isinstance(other, Store):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.slug == other.slug
            and self.logo == other.logo
            and self.active == other.active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name, self.slug, self.logo, self.active))
