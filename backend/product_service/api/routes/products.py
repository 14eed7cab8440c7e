"""Product Routes: /api/v1/products CRUD endpoints.

Invariants:
    - Request bodies pass core.validation before the service is called
    - Service outcomes are matched here: ProductNotFound → 404, DTO → 2xx
    - Create answers 201 with Location = collection URL + new id (query string ignored)
    - Update and delete answer 204 with an empty body
    - page < 0 or size < 1 is rejected with 400 (Query constraints)
    - Path ids must be canonical 8-4-4-4-12 UUIDs; other spellings are a 400

Design Decisions:
    - The service never raises for expected failures; the route turns a
      ProductNotFound outcome or a violation list into the matching typed error,
      and the boundary handler renders it with the status that error carries
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from product_service.api.dependencies import (
    get_product_service, product_id_path,
)
from product_service.core.errors import (
    RequestValidationFailed, ResourceNotFoundError,
)
from product_service.core.outcomes import ProductNotFound
from product_service.core.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from product_service.core.validation import validate_product_request
from product_service.schemas.errors import ErrorResponse
from product_service.schemas.product import (
    CreateProductRequest, PagedResponse, ProductDto, UpdateProductRequest,
)
from product_service.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _ensure_valid(body: CreateProductRequest | UpdateProductRequest) -> None:
    violations = validate_product_request(body)
    if violations:
        raise RequestValidationFailed(violations)


@router.post(
    "", response_model=ProductDto, status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
async def create_product(
    body: CreateProductRequest,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Create a new product."""
    _ensure_valid(body)
    product = await service.create_product(body)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=str(product.id)),
    )
    return product


@router.get(
    "", response_model=PagedResponse[ProductDto], responses=_BAD_REQUEST,
)
async def get_all_products_paginated(
    page: int = Query(DEFAULT_PAGE_NUMBER, ge=0, description="Zero-based page number"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, description="Number of items per page"),
    service: ProductService = Depends(get_product_service),
):
    """Paginated list of products."""
    return await service.get_all_products_paginated(page, size)


@router.get(
    "/{product_id}", response_model=ProductDto,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def get_product(
    product_id: UUID = Depends(product_id_path),
    service: ProductService = Depends(get_product_service),
):
    """Get product by id."""
    outcome = await service.get_product_by_id(product_id)
    if isinstance(outcome, ProductNotFound):
        raise ResourceNotFoundError(outcome.product_id)
    return outcome


@router.put(
    "/{product_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_product(
    body: UpdateProductRequest,
    product_id: UUID = Depends(product_id_path),
    service: ProductService = Depends(get_product_service),
):
    """Replace title and details of an existing product."""
    _ensure_valid(body)
    outcome = await service.update_product(product_id, body)
    if isinstance(outcome, ProductNotFound):
        raise ResourceNotFoundError(outcome.product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_product(
    product_id: UUID = Depends(product_id_path),
    service: ProductService = Depends(get_product_service),
):
    """Delete product by id."""
    outcome = await service.delete_product(product_id)
    if isinstance(outcome, ProductNotFound):
        raise ResourceNotFoundError(outcome.product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
