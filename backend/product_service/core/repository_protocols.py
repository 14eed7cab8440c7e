"""Boundary Protocols: contracts between core/services and the storage shell.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy directly
    - Every repository call happens inside a ProductStore.transaction() block
    - Pagination is computed by storage (LIMIT/OFFSET + COUNT), not by callers

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Store/Repository split: the store is built once at startup and owns the
      transaction boundary; a repository lives for exactly one transaction
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol
from uuid import UUID

from product_service.core.product import Product


class ProductRepository(Protocol):
    """Product persistence operations, bound to one open transaction."""
    async def insert(self, product: Product) -> Product: ...
    async def find_by_id(self, product_id: UUID) -> Product | None: ...
    async def find_all(
        self, page_number: int, page_size: int,
    ) -> tuple[list[Product], int]: ...
    async def exists_by_id(self, product_id: UUID) -> bool: ...
    async def update(self, product: Product) -> None: ...
    async def delete_by_id(self, product_id: UUID) -> None: ...
    async def delete_all(self) -> None: ...


class ProductStore(Protocol):
    """Opens transactions and hands out repositories bound to them."""
    def transaction(
        self, read_only: bool = False,
    ) -> AbstractAsyncContextManager[ProductRepository]: ...
