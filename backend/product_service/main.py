"""Product Service API: FastAPI application entry point and composition root.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the ErrorResponse envelope
    - CORS configured from settings (not hardcoded)
    - Storage adapter → ProductService composed once, on startup, and placed on app.state
    - The DatabaseSessionManager lives on app.state too; readiness reads it from there

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory plus module-level `app` for `uvicorn product_service.main:app`
    - Constructor composition over a DI container: three objects, wired in one place
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_service.api.error_handlers import register_error_handlers
from product_service.api.routes import health, products
from product_service.config import Settings, get_settings
from product_service.infrastructure.database import (
    DatabaseSessionManager, engine_options,
)
from product_service.infrastructure.observability import setup_logging
from product_service.infrastructure.product_repository import SqlAlchemyProductStore
from product_service.services.product_service import ProductService

logger = logging.getLogger(__name__)


def compose_product_service(db: DatabaseSessionManager) -> ProductService:
    """Storage adapter → service. The only place the two are wired together."""
    return ProductService(SqlAlchemyProductStore(db))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        **engine_options(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        ),
    )
    if settings.create_schema_on_startup:
        await db.create_schema()
    app.state.db_manager = db
    app.state.product_service = compose_product_service(db)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")
    await db.close()
    app.state.db_manager = None
    app.state.product_service = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Product Service API", version=settings.version, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    app.include_router(health.router)
    app.include_router(products.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("product_service.main:app", host="0.0.0.0", port=8000)
