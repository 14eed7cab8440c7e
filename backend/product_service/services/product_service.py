"""Product Service: orchestrates mapping, storage calls and domain outcomes.

Invariants:
    - Requests reaching the service were already validated by the endpoint
    - Each operation runs in exactly one storage transaction (reads are read-only)
    - Not-Found is returned as ProductNotFound, never raised
    - Storage faults propagate unmodified as DatabaseError

Design Decisions:
    - Explicit read-modify-write for update: fetch, Product.with_fields, repo.update
    - delete checks existence first; the check is not a row lock (accepted race)
    - Constructed once at startup with its ProductStore (explicit composition)
"""

import logging
from uuid import UUID

from product_service.core.outcomes import ProductNotFound
from product_service.core.pagination import compute_page_info
from product_service.core.repository_protocols import ProductStore
from product_service.schemas.mapper import to_dto, to_entity, to_paged_response
from product_service.schemas.product import (
    CreateProductRequest, PagedResponse, ProductDto, UpdateProductRequest,
)

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD operations on products."""

    def __init__(self, store: ProductStore):
        self._store = store

    async def create_product(self, request: CreateProductRequest) -> ProductDto:
        async with self._store.transaction() as repo:
            saved = await repo.insert(to_entity(request))
        logger.info("Product created", extra={"product_id": saved.id})
        return to_dto(saved)

    async def get_all_products_paginated(
        self, page_number: int, page_size: int,
    ) -> PagedResponse[ProductDto]:
        """Out-of-range pages give empty content with the true totals."""
        async with self._store.transaction(read_only=True) as repo:
            products, total = await repo.find_all(page_number, page_size)
        page = compute_page_info(page_number, page_size, total)
        return to_paged_response(products, page)

    async def get_product_by_id(
        self, product_id: UUID,
    ) -> ProductDto | ProductNotFound:
        async with self._store.transaction(read_only=True) as repo:
            product = await repo.find_by_id(product_id)
        if product is None:
            return self._not_found(product_id)
        return to_dto(product)

    async def update_product(
        self, product_id: UUID, request: UpdateProductRequest,
    ) -> ProductNotFound | None:
        async with self._store.transaction() as repo:
            product = await repo.find_by_id(product_id)
            if product is None:
                return self._not_found(product_id)
            await repo.update(product.with_fields(request.title, request.details))
        logger.info("Product updated", extra={"product_id": product_id})
        return None

    async def delete_product(self, product_id: UUID) -> ProductNotFound | None:
        async with self._store.transaction() as repo:
            if not await repo.exists_by_id(product_id):
                return self._not_found(product_id)
            await repo.delete_by_id(product_id)
        logger.info("Product deleted", extra={"product_id": product_id})
        return None

    @staticmethod
    def _not_found(product_id: UUID) -> ProductNotFound:
        outcome = ProductNotFound(product_id)
        logger.warning(outcome.message, extra={"product_id": product_id})
        return outcome
