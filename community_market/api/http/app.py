"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from community_market.api.http.app_data import ApplicationDependencies
from community_market.api.http.routers import communities, health, products, stores, sync
from community_market.api.utils.app_startup import configure_logging
from community_market.core.services import DbManageService, DbSessionService
from community_market.runtime.context import get_config


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the application. Tests pass their own database service."""
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_service = database_service or DbSessionService()
        DbManageService(db_service.engine).create_all()
        app.state.app_dependencies = ApplicationDependencies(database_service=db_service)
        logger.info("Starting up application in {} environment", config.app.environment)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if database_service is None:
                db_service.dispose()

    app = FastAPI(
        title="Community Market",
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )

    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        start = time.perf_counter()
        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return JSONResponse(
                    status_code=500,
                    content={"detail": "Internal Server Error", "request_id": request_id},
                    headers={"X-Request-ID": request_id},
                )

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")
            response.headers.setdefault("X-Request-ID", request_id)
            return response

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(stores.router)
    app.include_router(communities.router)
    app.include_router(sync.router)

    return app


__all__ = ["create_app"]


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    main_config = get_config()
    uvicorn.run(
        create_app(),
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,
    )
