"""Community repository for data access operations."""

from sqlmodel import Session, col, select

from .entity import Community
from .table import CommunityTable


class CommunityRepository:
    """Data-access layer for communities."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, internal_id: str) -> Community | None:
        row = self._session.get(CommunityTable, internal_id)
        if row is None:
            return None
        return Community.model_validate(row, from_attributes=True)

    def get_by_community_id(self, community_id: str) -> Community | None:
        """Look a community up by its logical (public) identifier."""
        statement = select(CommunityTable).where(
            CommunityTable.community_id == community_id
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Community.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Community]:
        return self._list(select(CommunityTable))

    def list_active(self) -> list[Community]:
        return self._list(select(CommunityTable).where(col(CommunityTable.active).is_(True)))

    def list_visible(self) -> list[Community]:
        return self._list(select(CommunityTable).where(col(CommunityTable.visible).is_(True)))

    def _list(self, statement) -> list[Community]:
        rows = self._session.exec(statement.order_by(col(CommunityTable.name))).all()
        return [Community.model_validate(row, from_attributes=True) for row in rows]

    def create(self, community: Community) -> Community:
        row = CommunityTable.model_validate(community.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Community.model_validate(row, from_attributes=True)
