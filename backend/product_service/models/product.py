"""Product ORM: the `products` table.

Invariants:
    - id is a UUID primary key generated on insert (uuid4), never updated
    - title and details are non-nullable text

Design Decisions:
    - Generic sqlalchemy.Uuid: native UUID on PostgreSQL, CHAR(32) on SQLite
    - ProductRecord never leaves infrastructure/; services see core.product.Product
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from product_service.db.base import Base


class ProductRecord(Base):
    """Row of the products table."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"ProductRecord(id={self.id!s}, title={self.title!r})"
