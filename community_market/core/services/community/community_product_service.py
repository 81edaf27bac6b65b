"""Community-scoped product listings over the denormalized projection."""

from sqlmodel import Session

from community_market.core.models.pagination import (
    PaginatedResult,
    ProjectionFilter,
    build_pagination,
)
from community_market.core.services.community.membership_resolver import (
    MembershipResolver,
)
from community_market.entities.community.projection import (
    CommunityProduct,
    CommunityProductRepository,
)


class CommunityProductService:
    """Lists the products visible in a community.

    Membership is resolved on every call, so adding or deactivating a member
    store is reflected on the next read without touching the projection.
    """

    def __init__(self, db_session: Session):
        self._resolver = MembershipResolver(db_session)
        self._projection_repo = CommunityProductRepository(db_session)

    def get_by_id(self, projection_id: str) -> CommunityProduct | None:
        return self._projection_repo.get(projection_id)

    def list_by_community(
        self, community_id: str, category: str | None = None
    ) -> list[CommunityProduct]:
        """All listed products of the community, newest first."""
        store_ids = self._resolver.resolve_active_store_ids(community_id)
        if not store_ids:
            return []

        items, _ = self._projection_repo.find_by_community_stores(
            store_ids, ProjectionFilter(category=category)
        )
        return items

    def list_by_category(self, community_id: str, category: str) -> list[CommunityProduct]:
        return self.list_by_community(community_id, category=category)

    def list_by_community_paginated(
        self,
        community_id: str,
        page_number: int,
        page_size: int,
        category: str | None = None,
    ) -> PaginatedResult[CommunityProduct]:
        """One page of the community's listed products, newest first.

        Raises:
            InvalidRequestError: if ``page_number`` or ``page_size`` is below 1.
        """
        pagination = build_pagination(page_number, page_size)

        store_ids = self._resolver.resolve_active_store_ids(community_id)
        if not store_ids:
            return PaginatedResult[CommunityProduct](
                data=[], total_count=0, page_number=page_number, page_size=page_size
            )

        items, total = self._projection_repo.find_by_community_stores(
            store_ids,
            ProjectionFilter(category=category),
            pagination,
        )
        return PaginatedResult[CommunityProduct](
            data=items, total_count=total, page_number=page_number, page_size=page_size
        )
