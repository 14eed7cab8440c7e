"""Pagination Math: total pages, first/last flags, offsets.

Tests:
    - total_pages == ceil(total / size), 0 when empty
    - first == (page == 0); last == (page == total_pages - 1 or total == 0)
    - Out-of-range page numbers are not errors
    - Negative page / zero size rejected
"""

import math

import pytest

from product_service.core.pagination import (
    compute_page_info, compute_total_pages, page_offset,
)


@pytest.mark.parametrize("total,size", [
    (0, 1), (1, 1), (3, 10), (10, 10), (11, 10), (25, 7), (100, 3),
])
def test_total_pages_is_ceiling(total, size):
    expected = math.ceil(total / size)
    assert compute_total_pages(total, size) == expected


def test_empty_result_has_zero_pages_and_is_first_and_last():
    info = compute_page_info(0, 10, 0)
    assert info.total_pages == 0
    assert info.first is True
    assert info.last is True


def test_three_elements_single_page():
    info = compute_page_info(0, 10, 3)
    assert (info.total_elements, info.total_pages) == (3, 1)
    assert info.first and info.last


def test_middle_page_is_neither_first_nor_last():
    info = compute_page_info(1, 2, 5)
    assert info.total_pages == 3
    assert info.first is False
    assert info.last is False


def test_final_page_is_last():
    info = compute_page_info(2, 2, 5)
    assert info.last is True
    assert info.first is False


def test_page_beyond_range_keeps_true_totals():
    info = compute_page_info(7, 2, 5)
    assert info.total_elements == 5
    assert info.total_pages == 3
    assert info.last is False


def test_page_offset():
    assert page_offset(0, 10) == 0
    assert page_offset(3, 10) == 30


@pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, -5)])
def test_out_of_contract_parameters_raise(page, size):
    with pytest.raises(ValueError):
        compute_page_info(page, size, 3)
