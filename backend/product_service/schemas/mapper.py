"""Entity <-> DTO mapping. Pure functions; only called after a successful read/write."""

from product_service.core.pagination import PageInfo
from product_service.core.product import Product
from product_service.schemas.product import (
    CreateProductRequest, PagedResponse, ProductDto,
)


def to_entity(request: CreateProductRequest) -> Product:
    """Transient Product from a validated create request."""
    return Product.new(title=request.title, details=request.details)


def to_dto(product: Product) -> ProductDto:
    if not product.is_persisted:
        raise ValueError("Cannot map a transient product to ProductDto")
    return ProductDto(id=product.id, title=product.title, details=product.details)


def to_paged_response(
    products: list[Product], page: PageInfo,
) -> PagedResponse[ProductDto]:
    return PagedResponse[ProductDto](
        page_number=page.page_number,
        page_size=page.page_size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        first=page.first,
        last=page.last,
        content=[to_dto(p) for p in products],
    )
