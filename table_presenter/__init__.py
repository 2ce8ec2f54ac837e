"""In-memory searchable, sortable, paginated table views."""

from table_presenter.errors import ConfigurationError
from table_presenter.models import ColumnSpec, SortState, TableSnapshot
from table_presenter.services.view_state import TableView

__all__ = ["ColumnSpec", "ConfigurationError", "SortState", "TableSnapshot", "TableView"]
