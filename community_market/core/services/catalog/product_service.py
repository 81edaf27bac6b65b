from loguru import logger
from sqlmodel import Session

from community_market.core.errors import InvalidRequestError, NotFoundError
from community_market.core.models.pagination import PaginatedResult, build_pagination
from community_market.core.models.requests import ProductInput
from community_market.core.services.sync.product_synchronizer import ProductSynchronizer
from community_market.entities.catalog.product import Product, ProductRepository
from community_market.runtime.context import get_config


class ProductService:
    """Product mutations that keep the community projection current.

    Every mutation marks the product pending and then synchronizes it, so a
    failed sync leaves the product queued for the reconciler.
    """

    def __init__(self, db_session: Session, sync_on_mutation: bool | None = None):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)
        self._synchronizer = ProductSynchronizer(db_session)
        self._sync_on_mutation = (
            get_config().sync.sync_on_mutation
            if sync_on_mutation is None
            else sync_on_mutation
        )

    def get(self, product_id: str) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def list_paginated(
        self, page_number: int, page_size: int, category: str | None = None
    ) -> PaginatedResult[Product]:
        """One page of the active catalog across all stores, newest first."""
        pagination = build_pagination(page_number, page_size)
        items, total = self._product_repo.find(category=category, pagination=pagination)
        return PaginatedResult[Product](
            data=items, total_count=total, page_number=page_number, page_size=page_size
        )

    def create(self, data: ProductInput) -> Product:
        product = self._product_repo.create(
            Product(**data.model_dump(), synchronized=False)
        )
        self._db_session.commit()
        logger.info("Product {} created for store {}", product.id, product.store_id)
        return self._after_mutation(product.id)

    def update(self, product_id: str, data: ProductInput) -> Product:
        product = self.get(product_id)
        updated = product.model_copy(update={**data.model_dump(), "synchronized": False})
        return self._save(updated)

    def add_image(self, product_id: str, url: str) -> Product:
        product = self.get(product_id)
        return self._save(
            product.model_copy(update={"images": [*product.images, url], "synchronized": False})
        )

    def remove_image(self, product_id: str, url: str) -> Product:
        product = self.get(product_id)
        if url not in product.images:
            raise NotFoundError("Image", url)
        images = [image for image in product.images if image != url]
        return self._save(
            product.model_copy(update={"images": images, "synchronized": False})
        )

    def reorder_images(self, product_id: str, images: list[str]) -> Product:
        """Replace the image order; the new list must be a permutation of the old."""
        product = self.get(product_id)
        if sorted(images) != sorted(product.images):
            raise InvalidRequestError(
                "Reordered images must contain exactly the product's images"
            )
        return self._save(
            product.model_copy(update={"images": list(images), "synchronized": False})
        )

    def _save(self, product: Product) -> Product:
        self._product_repo.update(product)
        self._db_session.commit()
        return self._after_mutation(product.id)

    def _after_mutation(self, product_id: str) -> Product:
        if self._sync_on_mutation and not self._synchronizer.sync_product(product_id):
            logger.warning(
                "Product {} left pending; it will be retried by reconciliation",
                product_id,
            )
        return self.get(product_id)
