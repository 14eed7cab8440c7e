"""Product Schemas: request/response DTOs and the paginated envelope.

Invariants:
    - Request fields accept any JSON value: absent, null, blank and non-string
      values are all reported together by core.validation, not piecemeal by pydantic
    - No number-to-str coercion; a non-string title or details is a violation
    - PagedResponse serializes camelCase keys (pageNumber, totalElements, ...)
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Documented as strings in OpenAPI; enforced by core.validation
_STRING = {"type": "string"}


class CreateProductRequest(BaseModel):
    """Data for a new product."""
    title: Any = Field(None, examples=["Water"], json_schema_extra=_STRING)
    details: Any = Field(
        None, examples=["The best water in the world"], json_schema_extra=_STRING,
    )


class UpdateProductRequest(BaseModel):
    """Full replacement of a product's fields."""
    title: Any = Field(None, examples=["Milk"], json_schema_extra=_STRING)
    details: Any = Field(
        None, examples=["Ordinary milk"], json_schema_extra=_STRING,
    )


class ProductDto(BaseModel):
    """Read projection of a persisted product."""
    id: UUID
    title: str
    details: str


class PagedResponse(BaseModel, Generic[T]):
    """One page of results plus its position in the full result set."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)
    total_elements: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    first: bool
    last: bool
    content: list[T]
