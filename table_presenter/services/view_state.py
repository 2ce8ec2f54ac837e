"""View-state engine: owns table state and derives render-ready snapshots.

Every public operation mutates the canonical state, recomputes the derived
state (filter, then page slice) and pushes a fresh :class:`TableSnapshot` to
the render target. Sorting is applied to the engine's own copy of the source
records, and filtering always derives from that sorted copy, so the sort order
survives any search.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from table_presenter.config import DEFAULT_PAGE_SIZE, EMPTY_MESSAGE
from table_presenter.errors import ConfigurationError
from table_presenter.models import (
    ColumnSpec,
    HeaderCell,
    Record,
    SortState,
    TableSnapshot,
    coerce_columns,
)
from table_presenter.services import filter_service, sort_service
from table_presenter.utils.pagination import (
    compute_total_pages,
    format_caption,
    format_out_of_range_caption,
    item_range,
    navigation_controls,
    paginate_records,
    pagination_window,
)

logger = logging.getLogger(__name__)

RenderTarget = Callable[[TableSnapshot, "TableView"], None]


class TableView:
    """Searchable, sortable, paginated view over an in-memory record list."""

    def __init__(
        self,
        target: Optional[RenderTarget],
        columns: Sequence[Union[ColumnSpec, Mapping[str, Any]]],
        data: Optional[Iterable[Record]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        show_search: Optional[bool] = None,
        sort_column: Optional[Union[SortState, Mapping[str, Any]]] = None,
        on_render_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        if target is None:
            raise ConfigurationError("A render target must be provided.")
        if not columns:
            raise ConfigurationError("At least one column is required.")
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ConfigurationError(f"Page size must be a positive integer, got {page_size!r}.")

        self.columns = coerce_columns(columns)
        initial_sort = SortState.coerce(sort_column) if sort_column is not None else SortState(self.columns[0].key)
        if self._column(initial_sort.key) is None:
            raise ConfigurationError(f"Sort column {initial_sort.key!r} does not match any column.")

        records = list(data or [])
        self.target = target
        self.page_size = page_size
        self.show_search = bool(records) if show_search is None else bool(show_search)
        self.on_render_complete = on_render_complete
        self.initial_sort = initial_sort

        self.sort_state = initial_sort
        self.search_term = ""
        self.current_page = 1
        self.source: List[Record] = []
        self.filtered: List[Record] = []
        self.snapshot: Optional[TableSnapshot] = None

        self._reset(records)
        self.render()

    # ------------------------------------------------------------------
    # Interaction hooks
    # ------------------------------------------------------------------

    def set_search_term(self, search_term: str) -> TableSnapshot:
        """Filter the sorted source records and return to the first page."""
        self.search_term = search_term or ""
        self.current_page = 1
        self._apply_filter()
        logger.debug("Search %r matched %d of %d records", self.search_term, len(self.filtered), len(self.source))
        return self.render()

    def set_sort(self, key: str) -> TableSnapshot:
        """Toggle the active column's direction or sort by a new column ascending."""
        if not sort_service.is_sortable(self.columns, key):
            raise ConfigurationError(f"Column {key!r} cannot be sorted.")
        self.sort_state = sort_service.next_sort_state(self.sort_state, key)
        self.current_page = 1
        self._apply_sort()
        self._apply_filter()
        logger.debug("Sorted by %s %s", self.sort_state.key, self.sort_state.direction)
        return self.render()

    def set_page(self, page_number: int) -> TableSnapshot:
        """Move to a page; pages outside the data render an empty slice."""
        self.current_page = int(page_number)
        if not 1 <= self.current_page <= max(self.total_pages, 1):
            logger.info("Page %d is outside 1..%d", self.current_page, self.total_pages)
        return self.render()

    def next_page(self) -> TableSnapshot:
        return self.set_page(self.current_page + 1)

    def previous_page(self) -> TableSnapshot:
        return self.set_page(self.current_page - 1)

    def replace_data(self, records: Iterable[Record], keep_search: bool = False) -> TableSnapshot:
        """Swap the dataset and reset sort and paging as on construction.

        The search term is cleared unless ``keep_search`` is set, in which case
        the current term is applied to the new records.
        """
        search_term = self.search_term if keep_search else ""
        self.sort_state = self.initial_sort
        self._reset(list(records), search_term)
        logger.debug("Replaced data with %d records", len(self.source))
        return self.render()

    def refresh(self) -> TableSnapshot:
        return self.render()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def total_items(self) -> int:
        return len(self.filtered)

    @property
    def total_pages(self) -> int:
        return compute_total_pages(len(self.filtered), self.page_size)

    @property
    def page_rows(self) -> List[Record]:
        return paginate_records(self.filtered, self.current_page, self.page_size)

    def build_snapshot(self) -> TableSnapshot:
        """Derive the render-ready snapshot for the current state."""
        rows = self.page_rows
        total_items = self.total_items
        total_pages = self.total_pages
        range_start, range_end = item_range(self.current_page, self.page_size, len(rows))
        previous, following = navigation_controls(self.current_page, total_pages)

        return TableSnapshot(
            columns=self.columns,
            headers=tuple(self._header(column) for column in self.columns),
            rows=tuple(rows),
            total_items=total_items,
            total_pages=total_pages,
            current_page=self.current_page,
            page_size=self.page_size,
            range_start=range_start,
            range_end=range_end,
            pagination_tokens=tuple(pagination_window(self.current_page, total_pages)),
            previous=previous,
            next=following,
            caption=self._caption(range_start, range_end, total_items, total_pages),
            search_term=self.search_term,
            show_search=self.show_search,
            empty_message=EMPTY_MESSAGE,
        )

    def render(self) -> TableSnapshot:
        """Push a fresh snapshot to the render target."""
        self.snapshot = self.build_snapshot()
        self.target(self.snapshot, self)
        if self.on_render_complete is not None:
            self.on_render_complete()
        return self.snapshot

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _column(self, key: str) -> Optional[ColumnSpec]:
        for column in self.columns:
            if column.key == key:
                return column
        return None

    def _sort_applies(self) -> bool:
        column = self._column(self.sort_state.key)
        return column is not None and column.is_sortable

    def _caption(self, range_start: int, range_end: int, total_items: int, total_pages: int) -> str:
        if not total_items:
            return ""
        if not range_start:
            return format_out_of_range_caption(self.current_page, total_pages, total_items)
        return format_caption(range_start, range_end, total_items)

    def _header(self, column: ColumnSpec) -> HeaderCell:
        direction = ""
        if column.is_sortable and column.key == self.sort_state.key:
            direction = self.sort_state.direction
        return HeaderCell(key=column.key, label=column.label, sortable=column.is_sortable, sort_direction=direction)

    def _reset(self, records: List[Record], search_term: str = "") -> None:
        self.source = records
        self.search_term = search_term
        self.current_page = 1
        self._apply_sort()
        self._apply_filter()

    def _apply_sort(self) -> None:
        # An initial sort on a non-sortable column keeps the source order.
        if self._sort_applies():
            self.source = sort_service.sort_records(self.source, self.sort_state)

    def _apply_filter(self) -> None:
        self.filtered = filter_service.filter_records(self.source, self.search_term, self.columns)
