"""Pagination Math: pure page metadata computed from (page_number, page_size, total).

Invariants:
    - page_number is zero-based, page_size >= 1
    - total_pages == ceil(total_elements / page_size); 0 when total_elements == 0
    - first == (page_number == 0)
    - last == (page_number == total_pages - 1) or total_elements == 0
    - A page_number beyond the range is not an error: offset simply yields no rows
"""

from dataclasses import dataclass

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageInfo:
    """Position of one page within the full result set."""
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool


def page_offset(page_number: int, page_size: int) -> int:
    """Row offset of the first element on the page."""
    return page_number * page_size


def compute_total_pages(total_elements: int, page_size: int) -> int:
    if total_elements <= 0:
        return 0
    return -(-total_elements // page_size)  # ceil without float rounding


def compute_page_info(
    page_number: int, page_size: int, total_elements: int,
) -> PageInfo:
    """Build page metadata; raises ValueError on out-of-contract parameters."""
    if page_number < 0:
        raise ValueError(f"page_number must be >= 0, got {page_number}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    total_pages = compute_total_pages(total_elements, page_size)
    return PageInfo(
        page_number=page_number,
        page_size=page_size,
        total_elements=total_elements,
        total_pages=total_pages,
        first=page_number == 0,
        last=total_elements == 0 or page_number == total_pages - 1,
    )
