"""Community product repository for the denormalized projection."""

from collections.abc import Collection

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, col, select

from community_market.core.models.pagination import Pagination, ProjectionFilter

from .entity import CommunityProduct
from .table import CommunityProductTable

# Columns left untouched when an existing projection is refreshed
_PRESERVED_ON_CONFLICT = frozenset({"id"})


class CommunityProductRepository:
    """Data-access layer for community product projections."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, projection_id: str) -> CommunityProduct | None:
        row = self._session.get(CommunityProductTable, projection_id)
        if row is None:
            return None
        return CommunityProduct.model_validate(row, from_attributes=True)

    def get_by_product_id(self, product_id: str) -> CommunityProduct | None:
        statement = (
            select(CommunityProductTable)
            .where(CommunityProductTable.product_id == product_id)
            .execution_options(populate_existing=True)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return CommunityProduct.model_validate(row, from_attributes=True)

    def upsert_by_product_id(self, projection: CommunityProduct) -> CommunityProduct:
        """Insert the projection, or refresh the existing row for its product.

        A single ``INSERT ... ON CONFLICT (product_id) DO UPDATE`` statement;
        the stored row keeps its own id when it already exists.
        """
        values = projection.model_dump(mode="python")
        insert = self._insert_for_dialect()

        statement = insert(CommunityProductTable).values(**values)
        statement = statement.on_conflict_do_update(
            index_elements=["product_id"],
            set_={
                name: statement.excluded[name]
                for name in values
                if name not in _PRESERVED_ON_CONFLICT
            },
        )
        self._session.exec(statement)  # type: ignore[call-overload]

        stored = self.get_by_product_id(projection.product_id)
        if stored is None:
            raise RuntimeError(
                f"Projection for product {projection.product_id} missing after upsert"
            )
        return stored

    def find_by_community_stores(
        self,
        store_ids: Collection[str],
        filters: ProjectionFilter | None = None,
        pagination: Pagination | None = None,
    ) -> tuple[list[CommunityProduct], int]:
        """Return the matching page and the total size of the filtered set.

        Both queries share one predicate so totals and pages stay consistent.
        """
        if not store_ids:
            return [], 0

        filters = filters or ProjectionFilter()
        predicate = [col(CommunityProductTable.store_id).in_(list(store_ids))]
        if filters.active_only:
            predicate.append(col(CommunityProductTable.active).is_(True))
            predicate.append(col(CommunityProductTable.store_active).is_(True))
        if filters.category is not None:
            predicate.append(CommunityProductTable.category == filters.category)

        count_statement = (
            select(func.count()).select_from(CommunityProductTable).where(*predicate)
        )
        total = self._session.exec(count_statement).one()

        statement = (
            select(CommunityProductTable)
            .where(*predicate)
            .order_by(
                col(CommunityProductTable.created_at).desc(),
                col(CommunityProductTable.id),
            )
        )
        if pagination is not None:
            statement = statement.offset(pagination.offset).limit(pagination.limit)

        rows = self._session.exec(statement).all()
        items = [CommunityProduct.model_validate(row, from_attributes=True) for row in rows]
        return items, int(total)

    def _insert_for_dialect(self):
        dialect = self._session.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert
        if dialect == "postgresql":
            return postgresql.insert
        raise NotImplementedError(
            f"Upsert by product id is not supported for dialect '{dialect}'"
        )
