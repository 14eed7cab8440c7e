"""Service Outcomes: explicit result values for expected, non-exceptional failures.

Invariants:
    - Service methods return ProductNotFound instead of raising it
    - Endpoints match on the outcome type to choose the HTTP status
    - Infrastructure failures are NOT outcomes; they still raise (core/errors.py)
"""

from dataclasses import dataclass
from uuid import UUID

from product_service.core.errors import PRODUCT_NOT_FOUND_WITH_ID


@dataclass(frozen=True)
class ProductNotFound:
    """No product row with the requested id existed at the time of the operation."""
    product_id: UUID

    @property
    def message(self) -> str:
        return PRODUCT_NOT_FOUND_WITH_ID.format(self.product_id)
