"""Product Storage Adapter: SQLAlchemy implementation of the repository Protocols.

Invariants:
    - Every repository call runs inside a transaction opened by SqlAlchemyProductStore
    - ProductRecord rows are converted to frozen core Product values before returning
    - insert() flushes so the generated id is known before the transaction commits
    - find_all orders by primary key: pages of one listing never overlap
    - find_all never binds an offset or limit larger than the row count; pages
      past the end return no rows without a second query

Design Decisions:
    - update()/delete_by_id() are single UPDATE/DELETE statements, not ORM
      attribute mutation: no implicit flush-on-mutation
    - exists_by_id + delete_by_id is NOT a row lock. A concurrent delete between the
      two surfaces as Not-Found for the loser or as a no-op delete (accepted race)
    - Read-only transactions issue SET TRANSACTION READ ONLY where the engine supports it
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from product_service.core.pagination import page_offset
from product_service.core.product import Product
from product_service.infrastructure.database import DatabaseSessionManager
from product_service.models.product import ProductRecord

logger = logging.getLogger(__name__)

_READ_ONLY_DIALECTS = frozenset({"postgresql"})


def _to_entity(record: ProductRecord) -> Product:
    return Product(id=record.id, title=record.title, details=record.details)


class SqlAlchemyProductRepository:
    """ProductRepository bound to one AsyncSession/transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert(self, product: Product) -> Product:
        record = ProductRecord(title=product.title, details=product.details)
        if product.id is not None:
            record.id = product.id
        self._session.add(record)
        await self._session.flush()
        return _to_entity(record)

    async def find_by_id(self, product_id: UUID) -> Product | None:
        record = await self._session.get(ProductRecord, product_id)
        return _to_entity(record) if record else None

    async def find_all(
        self, page_number: int, page_size: int,
    ) -> tuple[list[Product], int]:
        total = int(await self._session.scalar(
            select(func.count()).select_from(ProductRecord),
        ) or 0)
        offset = page_offset(page_number, page_size)
        if offset >= total:
            # Past the end: the driver never sees an offset it cannot bind
            return [], total
        result = await self._session.scalars(
            select(ProductRecord)
            .order_by(ProductRecord.id)
            .offset(offset)
            .limit(min(page_size, total - offset)),
        )
        return [_to_entity(r) for r in result.all()], total

    async def exists_by_id(self, product_id: UUID) -> bool:
        found = await self._session.scalar(
            select(ProductRecord.id).where(ProductRecord.id == product_id).limit(1),
        )
        return found is not None

    async def update(self, product: Product) -> None:
        if product.id is None:
            raise ValueError("Cannot update a transient product (id is None)")
        await self._session.execute(
            update(ProductRecord)
            .where(ProductRecord.id == product.id)
            .values(title=product.title, details=product.details),
        )

    async def delete_by_id(self, product_id: UUID) -> None:
        await self._session.execute(
            delete(ProductRecord).where(ProductRecord.id == product_id),
        )

    async def delete_all(self) -> None:
        """Remove every row. Test fixtures only; not reachable from the API."""
        await self._session.execute(delete(ProductRecord))


class SqlAlchemyProductStore:
    """ProductStore over a DatabaseSessionManager: one session + transaction per block."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    @asynccontextmanager
    async def transaction(
        self, read_only: bool = False,
    ) -> AsyncIterator[SqlAlchemyProductRepository]:
        """Commit on clean exit, roll back on exception (mapped to DatabaseError)."""
        async with self._db.session() as session:
            async with session.begin():
                if read_only and self._db.dialect_name in _READ_ONLY_DIALECTS:
                    await session.execute(text("SET TRANSACTION READ ONLY"))
                yield SqlAlchemyProductRepository(session)
