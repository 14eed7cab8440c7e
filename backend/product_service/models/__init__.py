"""ORM Models: SQLAlchemy declarative models.

All models imported here so Base.metadata is complete before create_all
or alembic autogenerate runs.
"""

from product_service.models.product import ProductRecord  # noqa: F401
