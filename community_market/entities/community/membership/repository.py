"""Membership repository for data access operations."""

from sqlmodel import Session, col, select

from community_market.entities._base import utcnow

from .entity import CommunityStore
from .table import CommunityStoreTable


class CommunityStoreRepository:
    """Data-access layer for community-store memberships."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_active_store_ids(self, community_internal_id: str) -> set[str]:
        statement = (
            select(CommunityStoreTable.store_id)
            .where(CommunityStoreTable.community_id == community_internal_id)
            .where(col(CommunityStoreTable.status).is_(True))
        )
        return set(self._session.exec(statement).all())

    def get(self, community_internal_id: str, store_id: str) -> CommunityStore | None:
        row = self._get_row(community_internal_id, store_id)
        if row is None:
            return None
        return CommunityStore.model_validate(row, from_attributes=True)

    def set_membership(
        self, community_internal_id: str, store_id: str, status: bool
    ) -> CommunityStore:
        """Create the membership or update its status."""
        row = self._get_row(community_internal_id, store_id)
        if row is None:
            row = CommunityStoreTable(
                community_id=community_internal_id, store_id=store_id, status=status
            )
        else:
            row.status = status
            row.updated_at = utcnow()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return CommunityStore.model_validate(row, from_attributes=True)

    def _get_row(
        self, community_internal_id: str, store_id: str
    ) -> CommunityStoreTable | None:
        statement = select(CommunityStoreTable).where(
            (CommunityStoreTable.community_id == community_internal_id)
            & (CommunityStoreTable.store_id == store_id)
        )
        return self._session.exec(statement).first()
