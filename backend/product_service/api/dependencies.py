"""FastAPI dependencies resolving objects composed once at startup."""

from uuid import UUID

from fastapi import Path, Request

from product_service.core.validation import CANONICAL_UUID_PATTERN
from product_service.infrastructure.database import DatabaseSessionManager
from product_service.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """The ProductService placed on app.state by the lifespan (or a test fixture)."""
    service = getattr(request.app.state, "product_service", None)
    if service is None:
        raise RuntimeError("Product service not initialized")
    return service


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


def product_id_path(
    product_id: str = Path(
        pattern=CANONICAL_UUID_PATTERN,
        description="Product id in canonical 8-4-4-4-12 form",
    ),
) -> UUID:
    """Only the canonical hyphenated form is accepted; anything else is a 400."""
    return UUID(product_id)
