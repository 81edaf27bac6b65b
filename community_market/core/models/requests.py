"""Input models for catalog and community mutations."""

from decimal import Decimal

from pydantic import BaseModel, Field


class ProductInput(BaseModel):
    store_id: str
    title: str
    description: str = ""
    long_description: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    images: list[str] = Field(default_factory=list)
    category: str = ""
    active: bool = True


class ImageInput(BaseModel):
    url: str


class ImageOrderInput(BaseModel):
    images: list[str] = Field(description="The product's image URLs in their new order")


class StoreInput(BaseModel):
    name: str
    slug: str
    logo: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    facebook: str = ""
    instagram: str = ""
    active: bool = True


class CommunityInput(BaseModel):
    community_id: str
    name: str
    title: str = ""
    description: str = ""
    phone: str = ""
    email: str = ""
    logo: str = ""
    open: bool = True
    active: bool = True
    visible: bool = True


class MembershipInput(BaseModel):
    status: bool = True
