"""Product Service: orchestration over a real (in-memory) store and a recording fake.

Tests:
    - create returns a DTO with a fresh id and the request's fields
    - create → get round-trips; update is a full replace; delete then get is Not-Found
    - Not-Found is returned as ProductNotFound, never raised, and leaves storage untouched
    - Paged listing metadata, including out-of-range pages
    - Reads use read-only transactions, writes use one read-write transaction
"""

from contextlib import asynccontextmanager
from uuid import uuid4

from product_service.core.outcomes import ProductNotFound
from product_service.core.product import Product
from product_service.schemas.product import (
    CreateProductRequest, ProductDto, UpdateProductRequest,
)
from product_service.services.product_service import ProductService


async def test_create_returns_dto_with_generated_id(service):
    request = CreateProductRequest(title="Milk", details="Best milk in the world")
    dto = await service.create_product(request)
    assert isinstance(dto, ProductDto)
    assert dto.id is not None
    assert (dto.title, dto.details) == (request.title, request.details)


async def test_created_ids_are_unique(service):
    ids = {
        (await service.create_product(
            CreateProductRequest(title=f"P{i}", details="d"),
        )).id
        for i in range(5)
    }
    assert len(ids) == 5


async def test_create_then_get_round_trips(service):
    created = await service.create_product(
        CreateProductRequest(title="Butter", details="Best butter in the world"),
    )
    fetched = await service.get_product_by_id(created.id)
    assert fetched == created


async def test_get_unknown_id_returns_not_found(service):
    pid = uuid4()
    outcome = await service.get_product_by_id(pid)
    assert outcome == ProductNotFound(pid)
    assert outcome.message == f"Product not found with id = {pid}"


async def test_update_replaces_fields(service, seed_products):
    milk, = await seed_products(("Milk", "Best milk in the world"))
    result = await service.update_product(
        milk.id, UpdateProductRequest(title="Kefir", details="Ordinary kefir"),
    )
    assert result is None
    fetched = await service.get_product_by_id(milk.id)
    assert (fetched.title, fetched.details) == ("Kefir", "Ordinary kefir")


async def test_update_unknown_id_returns_not_found_and_changes_nothing(
    service, seed_products,
):
    await seed_products()
    pid = uuid4()
    outcome = await service.update_product(
        pid, UpdateProductRequest(title="Milk", details="Ordinary milk"),
    )
    assert outcome == ProductNotFound(pid)
    page = await service.get_all_products_paginated(0, 10)
    assert page.total_elements == 3
    assert "Ordinary milk" not in {p.details for p in page.content}


async def test_delete_then_get_is_not_found(service, seed_products):
    milk, = await seed_products(("Milk", "Best milk in the world"))
    assert await service.delete_product(milk.id) is None
    assert isinstance(await service.get_product_by_id(milk.id), ProductNotFound)


async def test_delete_unknown_id_returns_not_found(service):
    pid = uuid4()
    assert await service.delete_product(pid) == ProductNotFound(pid)


async def test_second_delete_of_same_id_is_not_found(service, seed_products):
    milk, = await seed_products(("Milk", "Best milk in the world"))
    await service.delete_product(milk.id)
    assert isinstance(await service.delete_product(milk.id), ProductNotFound)


async def test_paginated_listing_of_three(service, seed_products):
    await seed_products()
    page = await service.get_all_products_paginated(0, 10)
    assert page.page_number == 0
    assert page.page_size == 10
    assert page.total_elements == 3
    assert page.total_pages == 1
    assert page.first is True
    assert page.last is True
    assert len(page.content) == 3


async def test_empty_listing(service):
    page = await service.get_all_products_paginated(0, 10)
    assert page.total_elements == 0
    assert page.total_pages == 0
    assert page.first and page.last
    assert page.content == []


async def test_page_beyond_range_is_empty_with_true_totals(service, seed_products):
    await seed_products()
    page = await service.get_all_products_paginated(4, 2)
    assert page.content == []
    assert page.total_elements == 3
    assert page.total_pages == 2


async def test_page_size_larger_than_total(service, seed_products):
    await seed_products()
    page = await service.get_all_products_paginated(0, 1000)
    assert len(page.content) == 3
    assert page.total_pages == 1


# ─── Transaction boundaries (recording fake) ──────────────────────


class _RecordingRepo:
    def __init__(self, products: dict):
        self.products = products
        self.calls: list[str] = []

    async def insert(self, product):
        self.calls.append("insert")
        saved = Product(id=uuid4(), title=product.title, details=product.details)
        self.products[saved.id] = saved
        return saved

    async def find_by_id(self, product_id):
        self.calls.append("find_by_id")
        return self.products.get(product_id)

    async def find_all(self, page_number, page_size):
        self.calls.append("find_all")
        rows = list(self.products.values())
        start = page_number * page_size
        return rows[start:start + page_size], len(rows)

    async def exists_by_id(self, product_id):
        self.calls.append("exists_by_id")
        return product_id in self.products

    async def update(self, product):
        self.calls.append("update")
        self.products[product.id] = product

    async def delete_by_id(self, product_id):
        self.calls.append("delete_by_id")
        self.products.pop(product_id, None)

    async def delete_all(self):
        self.products.clear()


class _RecordingStore:
    def __init__(self):
        self.products: dict = {}
        self.transactions: list[tuple[bool, list[str]]] = []

    @asynccontextmanager
    async def transaction(self, read_only=False):
        repo = _RecordingRepo(self.products)
        yield repo
        self.transactions.append((read_only, repo.calls))


async def test_writes_use_one_read_write_transaction():
    store = _RecordingStore()
    svc = ProductService(store)
    dto = await svc.create_product(CreateProductRequest(title="a", details="b"))
    await svc.update_product(dto.id, UpdateProductRequest(title="c", details="d"))
    await svc.delete_product(dto.id)
    assert store.transactions == [
        (False, ["insert"]),
        (False, ["find_by_id", "update"]),
        (False, ["exists_by_id", "delete_by_id"]),
    ]


async def test_reads_use_read_only_transactions():
    store = _RecordingStore()
    svc = ProductService(store)
    await svc.get_product_by_id(uuid4())
    await svc.get_all_products_paginated(0, 10)
    assert store.transactions == [
        (True, ["find_by_id"]),
        (True, ["find_all"]),
    ]


async def test_update_writes_full_replacement_value():
    store = _RecordingStore()
    svc = ProductService(store)
    dto = await svc.create_product(CreateProductRequest(title="Milk", details="Best"))
    await svc.update_product(dto.id, UpdateProductRequest(title="Milk", details="Ordinary"))
    assert store.products[dto.id] == Product(id=dto.id, title="Milk", details="Ordinary")
