"""Store repository for data access operations."""

from sqlmodel import Session, select

from community_market.entities._base import utcnow

from .entity import Store
from .table import StoreTable


class StoreRepository:
    """Data-access layer for store profiles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, store_id: str) -> Store | None:
        row = self._session.get(StoreTable, store_id)
        if row is None:
            return None
        return Store.model_validate(row, from_attributes=True)

    def get_by_slug(self, slug: str) -> Store | None:
        statement = select(StoreTable).where(StoreTable.slug == slug.strip().lower())
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Store.model_validate(row, from_attributes=True)

    def create(self, store: Store) -> Store:
        row = StoreTable.model_validate(store.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Store.model_validate(row, from_attributes=True)

    def update(self, store: Store) -> Store:
        row = self._session.get(StoreTable, store.id)
        if row is None:
            raise ValueError(f"Store with ID {store.id} not found")

        data = store.model_dump(exclude={"id", "created_at", "updated_at"})
        data["updated_at"] = utcnow()
        row.sqlmodel_update(data)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Store.model_validate(row, from_attributes=True)
