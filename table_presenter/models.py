"""Data model shared by the view-state engine and render adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from table_presenter.config import ELLIPSIS, EMPTY_MESSAGE, SORT_ASC, SORT_DESC, SORT_DIRECTIONS
from table_presenter.errors import ConfigurationError
from table_presenter.utils.helpers import normalize_text

Record = Mapping[str, Any]
CellRenderer = Callable[[Record], str]
PaginationToken = Union[int, str]


@dataclass(frozen=True)
class ColumnSpec:
    """Describe how one field is labelled, searched, sorted and rendered."""

    key: str
    label: str = ""
    ignore_filtering: bool = False
    cell_renderer: Optional[CellRenderer] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ConfigurationError("Column key must be non-empty.")
        if not self.label:
            object.__setattr__(self, "label", self.key)

    @property
    def is_sortable(self) -> bool:
        return not self.ignore_filtering

    def value(self, record: Record) -> Any:
        return record.get(self.key)

    def render(self, record: Record) -> str:
        """Return the cell content, preferring the custom renderer when set."""
        if self.cell_renderer is not None:
            return self.cell_renderer(record)
        return normalize_text(self.value(record))

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "ColumnSpec":
        """Build a column from the option dictionaries callers pass around."""
        if "key" not in options:
            raise ConfigurationError("Column options must define a key.")
        ignore_filtering = options.get("ignore_filtering", options.get("ignoreFiltering", False))
        return cls(
            key=str(options["key"]),
            label=str(options.get("label") or options["key"]),
            ignore_filtering=bool(ignore_filtering),
            cell_renderer=options.get("cell_renderer", options.get("cell")),
        )


def coerce_columns(columns: Sequence[Union[ColumnSpec, Mapping[str, Any]]]) -> Tuple[ColumnSpec, ...]:
    """Normalize column options into ColumnSpec instances."""
    return tuple(
        column if isinstance(column, ColumnSpec) else ColumnSpec.from_dict(column)
        for column in columns
    )


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""

    key: str
    direction: str = SORT_ASC

    def __post_init__(self) -> None:
        if self.direction not in SORT_DIRECTIONS:
            raise ConfigurationError(
                f"Sort direction must be one of {', '.join(SORT_DIRECTIONS)}, got {self.direction!r}."
            )

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESC

    def toggled(self) -> "SortState":
        return SortState(self.key, SORT_ASC if self.descending else SORT_DESC)

    @classmethod
    def coerce(cls, value: Union["SortState", Mapping[str, Any]]) -> "SortState":
        """Accept a SortState or a mapping with key and order/direction."""
        if isinstance(value, SortState):
            return value
        if "key" not in value:
            raise ConfigurationError("Sort column must define a key.")
        direction = value.get("direction", value.get("order", SORT_ASC))
        return cls(key=str(value["key"]), direction=str(direction).lower())


@dataclass(frozen=True)
class NavControl:
    """Previous/next pagination control pointing at a target page."""

    page: int
    disabled: bool


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    sortable: bool
    sort_direction: str = ""


@dataclass(frozen=True)
class TableSnapshot:
    """Render-ready output of one view-state transition."""

    columns: Tuple[ColumnSpec, ...]
    headers: Tuple[HeaderCell, ...]
    rows: Tuple[Record, ...]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    range_start: int
    range_end: int
    pagination_tokens: Tuple[PaginationToken, ...]
    previous: Optional[NavControl]
    next: Optional[NavControl]
    caption: str
    search_term: str = ""
    show_search: bool = True
    empty_message: str = EMPTY_MESSAGE

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @staticmethod
    def is_ellipsis(token: PaginationToken) -> bool:
        return token == ELLIPSIS

    def sort_indicator_for(self, column_key: str) -> str:
        """Return "asc", "desc" or "" for the given column header."""
        for header in self.headers:
            if header.key == column_key:
                return header.sort_direction
        return ""

    def cell_rows(self) -> List[List[str]]:
        """Return rendered cell content for the page rows, column by column."""
        return [[column.render(record) for column in self.columns] for record in self.rows]
