"""Bulk re-synchronization of community projections."""

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import AbstractContextManager
from dataclasses import dataclass
from functools import partial

from loguru import logger
from sqlmodel import Session

from community_market.core.services.sync.product_synchronizer import ProductSynchronizer
from community_market.entities.catalog.product import ProductRepository
from community_market.runtime.context import get_config

SessionFactory = Callable[[], AbstractContextManager[Session]]


@dataclass
class ReconcileReport:
    """Outcome counts of one reconciliation run."""

    synced: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.synced + self.skipped + self.failed


class ProductReconciler:
    """Runs the product synchronizer over many products.

    A product that cannot be synchronized (missing store, storage error, bad
    row) is logged and counted, and never aborts the batch. With
    ``max_workers`` above one, products are synchronized on a bounded thread
    pool, each in its own session from ``session_factory``.
    """

    def __init__(
        self,
        db_session: Session,
        max_workers: int | None = None,
        session_factory: SessionFactory | None = None,
    ):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)
        self._max_workers = max_workers or get_config().sync.max_workers
        self._session_factory = session_factory

        if self._max_workers > 1 and session_factory is None:
            raise ValueError("Concurrent reconciliation requires a session factory")

    def sync_all_unsynchronized(self) -> int:
        """Synchronize every active product whose projection is pending.

        Returns:
            Number of products synchronized successfully.
        """
        products = self._product_repo.list_active_unsynchronized()
        logger.info("Reconciling {} unsynchronized products", len(products))
        report = self._run(product.id for product in products)
        self._log_report("unsynchronized", report)
        return report.synced

    def sync_products_by_store(self, store_id: str) -> int:
        """Re-synchronize every active product of one store, whatever its flag.

        Returns:
            Number of products synchronized successfully.
        """
        products = self._product_repo.list_by_store(store_id, active_only=True)
        logger.info("Reconciling {} products of store {}", len(products), store_id)
        report = self._run(product.id for product in products)
        self._log_report(f"store {store_id}", report)
        return report.synced

    def _run(self, product_ids: Iterable[str]) -> ReconcileReport:
        product_ids = list(product_ids)
        if self._max_workers > 1 and len(product_ids) > 1:
            return self._run_concurrent(product_ids)
        return self._run_sequential(product_ids)

    def _run_sequential(self, product_ids: list[str]) -> ReconcileReport:
        report = ReconcileReport()
        synchronizer = ProductSynchronizer(self._db_session)
        for product_id in product_ids:
            self._record(report, product_id, partial(synchronizer.sync_product, product_id))
        return report

    def _run_concurrent(self, product_ids: list[str]) -> ReconcileReport:
        report = ReconcileReport()
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="reconcile"
        ) as executor:
            futures = {
                executor.submit(self._sync_in_own_session, product_id): product_id
                for product_id in product_ids
            }
            for future in as_completed(futures):
                self._record(report, futures[future], future.result)
        return report

    def _sync_in_own_session(self, product_id: str) -> bool:
        if self._session_factory is None:
            raise RuntimeError("Concurrent reconciliation requires a session factory")
        with self._session_factory() as session:
            return ProductSynchronizer(session).sync_product(product_id)

    @staticmethod
    def _record(
        report: ReconcileReport, product_id: str, outcome: Callable[[], bool]
    ) -> None:
        try:
            synced = outcome()
        except Exception:
            logger.exception("Failed to synchronize product {}", product_id)
            report.failed += 1
            return

        if synced:
            report.synced += 1
        else:
            report.skipped += 1

    @staticmethod
    def _log_report(scope: str, report: ReconcileReport) -> None:
        logger.info(
            "Reconciliation of {} complete. synced={}, skipped={}, failed={}.",
            scope,
            report.synced,
            report.skipped,
            report.failed,
        )
