from __future__ import annotations

import pytest

from table_presenter.config import ELLIPSIS
from table_presenter.models import NavControl
from table_presenter.utils.pagination import (
    compute_total_pages,
    format_caption,
    format_out_of_range_caption,
    item_range,
    navigation_controls,
    page_slice,
    paginate_records,
    pagination_window,
)


@pytest.mark.parametrize(
    ("current_page", "total_pages", "expected"),
    [
        (1, 1, []),
        (1, 0, []),
        (1, 10, [1, 2, 3, ELLIPSIS, 10]),
        (5, 10, [1, ELLIPSIS, 3, 4, 5, 6, 7, ELLIPSIS, 10]),
        (9, 10, [1, ELLIPSIS, 7, 8, 9, 10]),
        (4, 10, [1, 2, 3, 4, 5, 6, ELLIPSIS, 10]),
        (7, 10, [1, ELLIPSIS, 5, 6, 7, 8, 9, 10]),
        (1, 2, [1, 2]),
        (3, 5, [1, 2, 3, 4, 5]),
    ],
)
def test_pagination_window(current_page, total_pages, expected):
    assert pagination_window(current_page, total_pages, 2) == expected


def test_pagination_window_never_has_adjacent_ellipses():
    for total_pages in range(2, 30):
        for current_page in range(1, total_pages + 1):
            tokens = pagination_window(current_page, total_pages)
            for left, right in zip(tokens, tokens[1:]):
                assert not (left == ELLIPSIS and right == ELLIPSIS)
            numbers = [token for token in tokens if token != ELLIPSIS]
            assert numbers == sorted(numbers)
            assert numbers[0] == 1 and numbers[-1] == total_pages
            assert current_page in numbers


def test_pagination_window_respects_radius():
    assert pagination_window(6, 12, radius=1) == [1, ELLIPSIS, 5, 6, 7, ELLIPSIS, 12]


def test_compute_total_pages():
    assert compute_total_pages(0, 10) == 0
    assert compute_total_pages(1, 10) == 1
    assert compute_total_pages(10, 10) == 1
    assert compute_total_pages(11, 10) == 2
    assert compute_total_pages(25, 20) == 2


def test_page_slice_offsets():
    assert page_slice(1, 10) == (0, 10)
    assert page_slice(3, 10) == (20, 30)


def test_pages_concatenate_to_full_sequence():
    records = list(range(23))
    page_size = 5
    total_pages = compute_total_pages(len(records), page_size)

    pages = [paginate_records(records, page, page_size) for page in range(1, total_pages + 1)]

    assert [item for page in pages for item in page] == records
    assert all(len(page) == page_size for page in pages[:-1])
    assert 0 < len(pages[-1]) <= page_size


@pytest.mark.parametrize("page_number", [0, -1, -3, 6, 100])
def test_out_of_range_pages_are_empty(page_number):
    assert paginate_records(list(range(23)), page_number, 5) == []


def test_item_range_and_caption():
    assert item_range(1, 10, 10) == (1, 10)
    assert item_range(2, 10, 2) == (11, 12)
    assert item_range(5, 10, 0) == (0, 0)
    assert format_caption(1, 10, 12) == "Showing 1 to 10 of 12 items."
    assert format_caption(11, 11, 11) == "Showing 11 of 11 items."


def test_navigation_controls():
    assert navigation_controls(1, 1) == (None, None)
    assert navigation_controls(1, 3) == (NavControl(0, True), NavControl(2, False))
    assert navigation_controls(2, 3) == (NavControl(1, False), NavControl(3, False))
    assert navigation_controls(3, 3) == (NavControl(2, False), NavControl(4, True))


@pytest.mark.parametrize(
    ("current_page", "total_pages", "expected"),
    [
        (7, 3, [1, 2, 3]),
        (15, 10, [1, ELLIPSIS, 8, 9, 10]),
        (0, 10, [1, 2, 3, ELLIPSIS, 10]),
        (-4, 10, [1, 2, 3, ELLIPSIS, 10]),
    ],
)
def test_out_of_range_page_windows_centre_on_nearest_page(current_page, total_pages, expected):
    assert pagination_window(current_page, total_pages) == expected


def test_out_of_range_caption():
    assert format_out_of_range_caption(7, 3, 25) == "Page 7 is outside pages 1 to 3 of 25 items."
