"""Product repository for data access operations."""

from sqlalchemy import func
from sqlmodel import Session, col, select

from community_market.core.models.pagination import Pagination
from community_market.entities._base import utcnow

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for authoritative product records."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, product: Product) -> Product:
        row = ProductTable.model_validate(product.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product with ID {product.id} not found")

        data = product.model_dump(exclude={"id", "created_at", "updated_at"})
        data["updated_at"] = utcnow()
        row.sqlmodel_update(data)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def list_by_store(self, store_id: str, active_only: bool = True) -> list[Product]:
        statement = select(ProductTable).where(ProductTable.store_id == store_id)
        if active_only:
            statement = statement.where(col(ProductTable.active).is_(True))
        statement = statement.order_by(col(ProductTable.created_at))
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find(
        self,
        category: str | None = None,
        active_only: bool = True,
        pagination: Pagination | None = None,
    ) -> tuple[list[Product], int]:
        """Catalog-wide listing, newest first, with the total size of the filtered set."""
        predicate = []
        if active_only:
            predicate.append(col(ProductTable.active).is_(True))
        if category is not None:
            predicate.append(ProductTable.category == category)

        count_statement = select(func.count()).select_from(ProductTable).where(*predicate)
        total = self._session.exec(count_statement).one()

        statement = (
            select(ProductTable)
            .where(*predicate)
            .order_by(col(ProductTable.created_at).desc(), col(ProductTable.id))
        )
        if pagination is not None:
            statement = statement.offset(pagination.offset).limit(pagination.limit)

        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows], int(total)

    def list_active_unsynchronized(self) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(col(ProductTable.active).is_(True))
            .where(col(ProductTable.synchronized).is_(False))
            .order_by(col(ProductTable.created_at))
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def set_synchronized(self, product_id: str, synchronized: bool) -> bool:
        """Flip the synchronized marker. Returns False when no row matched."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False

        row.synchronized = synchronized
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        return True
