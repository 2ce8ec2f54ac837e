"""Search filtering for table records."""

from __future__ import annotations

from typing import List, Sequence

from table_presenter.models import ColumnSpec, Record
from table_presenter.utils.helpers import fold_text


def normalize_search_term(search_term: object) -> str:
    """Trim and case-fold a raw search input."""
    return fold_text(search_term)


def searchable_columns(columns: Sequence[ColumnSpec]) -> List[ColumnSpec]:
    """Return the columns consulted when matching a search term."""
    return [column for column in columns if not column.ignore_filtering]


def record_matches(record: Record, search_term: str, columns: Sequence[ColumnSpec]) -> bool:
    """Return True if any column value contains the already folded term."""
    for column in columns:
        if search_term in fold_text(column.value(record)):
            return True
    return False


def filter_records(records: Sequence[Record], search_term: object, columns: Sequence[ColumnSpec]) -> List[Record]:
    """Keep records matching the term in at least one searchable column, in input order."""
    term = normalize_search_term(search_term)
    if not term:
        return list(records)

    consulted = searchable_columns(columns)
    return [record for record in records if record_matches(record, term, consulted)]
