"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from community_market.api.http.app_data import ApplicationDependencies
from community_market.core.services import (
    CommunityProductService,
    CommunityService,
    DbSessionService,
    ProductReconciler,
    ProductService,
    ProductSynchronizer,
    StoreService,
)
from community_market.runtime.context import get_config


def get_database_service(request: Request) -> DbSessionService:
    """Get the shared database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_synchronizer(
    db: Session = Depends(get_db_session),
) -> ProductSynchronizer:
    return ProductSynchronizer(db)


def get_product_reconciler(
    db: Session = Depends(get_db_session),
    database_service: DbSessionService = Depends(get_database_service),
) -> ProductReconciler:
    return ProductReconciler(
        db,
        max_workers=get_config().sync.max_workers,
        session_factory=database_service.session_scope,
    )


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(db)


def get_store_service(
    db: Session = Depends(get_db_session),
    reconciler: ProductReconciler = Depends(get_product_reconciler),
) -> StoreService:
    return StoreService(db, reconciler)


def get_community_service(db: Session = Depends(get_db_session)) -> CommunityService:
    return CommunityService(db)


def get_community_product_service(
    db: Session = Depends(get_db_session),
) -> CommunityProductService:
    return CommunityProductService(db)
