"""Single-product synchronization into the community projection."""

from loguru import logger
from sqlmodel import Session

from community_market.entities._base import utcnow
from community_market.entities.catalog.product import Product, ProductRepository
from community_market.entities.catalog.store import Store, StoreRepository
from community_market.entities.community.projection import (
    CommunityProduct,
    CommunityProductRepository,
)


def build_projection(product: Product, store: Store) -> CommunityProduct:
    """Join a product with its store's public profile.

    The returned record carries a fresh id; the repository keeps the stored
    id when a projection for the product already exists.
    """
    now = utcnow()
    return CommunityProduct(
        product_id=product.id,
        store_id=product.store_id,
        created_at=product.created_at,
        updated_at=now,
        synced_at=now,
        title=product.title,
        description=product.description,
        long_description=product.long_description,
        price=product.price,
        images=list(product.images),
        category=product.category,
        active=product.active,
        store_slug=store.slug,
        store_name=store.name,
        store_logo=store.logo,
        phone=store.phone,
        email=store.email,
        website=store.website,
        facebook_link=store.facebook,
        instagram_link=store.instagram,
        store_active=store.active,
    )


class ProductSynchronizer:
    """Refreshes the community projection of one product at a time."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)
        self._store_repo = StoreRepository(db_session)
        self._projection_repo = CommunityProductRepository(db_session)

    def sync_product(self, product_id: str) -> bool:
        """Synchronize one product into the community projection.

        Returns:
            True once the projection is written and the product is marked
            synchronized. False when the product or its store does not exist;
            nothing is written in that case.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: storage failures, including failed
                reads, propagate after the transaction is rolled back.
        """
        try:
            projection_id = self._sync(product_id)
        except Exception:
            # Leaves the session usable for the next product of a batch
            self._db_session.rollback()
            raise

        if projection_id is None:
            return False
        logger.debug(
            "Product {} synchronized into projection {}", product_id, projection_id
        )
        return True

    def _sync(self, product_id: str) -> str | None:
        product = self._product_repo.get(product_id)
        if product is None:
            logger.warning("Sync skipped: product {} not found", product_id)
            return None

        store = self._store_repo.get(product.store_id)
        if store is None:
            logger.warning(
                "Sync skipped: store {} of product {} not found",
                product.store_id,
                product_id,
            )
            return None

        projection = self._projection_repo.upsert_by_product_id(
            build_projection(product, store)
        )
        self._product_repo.set_synchronized(product_id, True)
        self._db_session.commit()
        return projection.id
