from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from community_market.core.errors import DuplicateSlugError, NotFoundError
from community_market.core.models.requests import StoreInput
from community_market.core.services.sync.reconciler import ProductReconciler
from community_market.entities.catalog.store import Store, StoreRepository


class StoreService:
    """Store profile management.

    A profile update re-synchronizes all of the store's active products so
    the denormalized store fields in the projection follow the edit.
    """

    def __init__(self, db_session: Session, reconciler: ProductReconciler | None = None):
        self._db_session = db_session
        self._store_repo = StoreRepository(db_session)
        self._reconciler = reconciler or ProductReconciler(db_session, max_workers=1)

    def get(self, store_id: str) -> Store:
        store = self._store_repo.get(store_id)
        if store is None:
            raise NotFoundError("Store", store_id)
        return store

    def get_by_slug(self, slug: str) -> Store:
        store = self._store_repo.get_by_slug(slug)
        if store is None:
            raise NotFoundError("Store", slug)
        return store

    def create(self, data: StoreInput) -> Store:
        store = Store(**data.model_dump())
        if self._store_repo.get_by_slug(store.slug) is not None:
            raise DuplicateSlugError(store.slug)

        try:
            created = self._store_repo.create(store)
            self._db_session.commit()
        except IntegrityError as e:
            # A concurrent insert took the slug after the check above
            self._db_session.rollback()
            raise DuplicateSlugError(store.slug) from e
        logger.info("Store {} created with slug {}", created.id, created.slug)
        return created

    def update(self, store_id: str, data: StoreInput) -> tuple[Store, int]:
        """Apply a profile edit and refresh the store's projections.

        Returns:
            The updated store and the number of products re-synchronized.
        """
        current = self.get(store_id)
        updated = current.model_copy(update=data.model_dump())
        # Run the incoming slug through the entity's normalization
        updated = Store.model_validate(updated.model_dump())

        holder = self._store_repo.get_by_slug(updated.slug)
        if holder is not None and holder.id != store_id:
            raise DuplicateSlugError(updated.slug)

        try:
            store = self._store_repo.update(updated)
            self._db_session.commit()
        except IntegrityError as e:
            self._db_session.rollback()
            raise DuplicateSlugError(updated.slug) from e

        synced = self._reconciler.sync_products_by_store(store_id)
        logger.info("Store {} updated; {} products re-synchronized", store_id, synced)
        return store, synced
