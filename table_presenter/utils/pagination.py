"""Pagination helpers for in-memory table slicing."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple, TypeVar

from table_presenter.config import ELLIPSIS, PAGINATION_RADIUS
from table_presenter.models import NavControl, PaginationToken

T = TypeVar("T")


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0 or total_rows <= 0:
        return 0
    return math.ceil(total_rows / page_size)


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def paginate_records(records: Sequence[T], page_number: int, page_size: int) -> List[T]:
    """Return the records on one page; out-of-range pages are empty, not clamped."""
    if page_number < 1 or page_size <= 0:
        return []
    start, end = page_slice(page_number, page_size)
    return list(records[start:end])


def item_range(page_number: int, page_size: int, page_length: int) -> Tuple[int, int]:
    """Return the 1-based first/last item numbers shown on a page."""
    if page_length <= 0:
        return 0, 0
    start = (page_number - 1) * page_size + 1
    return start, start + page_length - 1


def format_caption(range_start: int, range_end: int, total_items: int) -> str:
    """Build the "Showing X to Y of N items." caption."""
    if range_start == range_end:
        return f"Showing {range_start} of {total_items} items."
    return f"Showing {range_start} to {range_end} of {total_items} items."


def format_out_of_range_caption(page_number: int, total_pages: int, total_items: int) -> str:
    """Build the caption for a page outside 1..total_pages."""
    return f"Page {page_number} is outside pages 1 to {total_pages} of {total_items} items."


def pagination_window(
    current_page: int,
    total_pages: int,
    radius: int = PAGINATION_RADIUS,
) -> List[PaginationToken]:
    """Return the page numbers and ellipses to show around the current page.

    The first and last pages are always reachable. A gap of a single page is
    shown as that page number, so two ellipses never sit next to each other.
    """
    if total_pages <= 1:
        return []

    # Out-of-range pages centre the window on the nearest real page.
    current_page = min(max(current_page, 1), total_pages)
    surround_start = max(1, current_page - radius)
    surround_end = min(total_pages, current_page + radius)

    tokens: List[PaginationToken] = []
    if surround_start > 2:
        tokens.extend([1, ELLIPSIS])
    elif surround_start > 1:
        tokens.append(1)

    tokens.extend(range(surround_start, surround_end + 1))

    if surround_end < total_pages - 1:
        tokens.extend([ELLIPSIS, total_pages])
    elif surround_end < total_pages:
        tokens.append(total_pages)
    return tokens


def navigation_controls(
    current_page: int,
    total_pages: int,
) -> Tuple[Optional[NavControl], Optional[NavControl]]:
    """Return the previous/next controls, or (None, None) for a single page."""
    if total_pages <= 1:
        return None, None
    previous = NavControl(page=current_page - 1, disabled=current_page <= 1)
    following = NavControl(page=current_page + 1, disabled=current_page >= total_pages)
    return previous, following
