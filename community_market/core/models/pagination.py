"""Query models shared by listing operations."""

from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

from community_market.core.errors import InvalidRequestError

T = TypeVar("T")


class ProjectionFilter(BaseModel):
    """Filters applied to community product listings."""

    category: str | None = Field(default=None, description="Restrict to one category")
    active_only: bool = Field(
        default=True, description="Hide inactive products and inactive stores"
    )


class Pagination(BaseModel):
    """One-based page selection."""

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PaginatedResult(BaseModel, Generic[T]):
    """A page of results together with the size of the full result set."""

    data: list[T] = Field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 20

    @computed_field
    @property
    def total_pages(self) -> int:
        return ceil(self.total_count / self.page_size) if self.page_size else 0


def build_pagination(page_number: int, page_size: int) -> Pagination:
    """Validate caller-supplied page arguments.

    Raises:
        InvalidRequestError: if ``page_number`` or ``page_size`` is below 1.
    """
    if page_number < 1 or page_size < 1:
        raise InvalidRequestError("page_number and page_size must be positive")
    return Pagination(page_number=page_number, page_size=page_size)
