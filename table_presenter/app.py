"""Streamlit app entrypoint for the table presenter demo."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import streamlit as st

from table_presenter.components.table import StreamlitTableTarget, get_table_view, render_table_view
from table_presenter.config import DEFAULT_PAGE_SIZE, SAMPLE_COLUMNS, SAMPLE_RECORDS_FILE
from table_presenter.models import ColumnSpec
from table_presenter.services import data_loader
from table_presenter.services.view_state import TableView

TABLE_KEY = "records"


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)
    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_records(records_path: str, file_mtime: float) -> List[Dict[str, Any]]:
    """Load records with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_records(Path(records_path))


def email_cell(record: Dict[str, Any]) -> str:
    email = record.get("email") or ""
    return f"✉ {email}" if email else ""


def build_columns() -> List[ColumnSpec]:
    columns = [ColumnSpec.from_dict(options) for options in SAMPLE_COLUMNS]
    return [
        ColumnSpec(column.key, column.label, column.ignore_filtering, email_cell) if column.key == "email" else column
        for column in columns
    ]


def load_current_records() -> List[Dict[str, Any]]:
    return get_records(str(SAMPLE_RECORDS_FILE), SAMPLE_RECORDS_FILE.stat().st_mtime)


def reload_records(view: TableView) -> None:
    """Swap in freshly loaded records and clear the search box."""
    get_records.clear()
    view.replace_data(load_current_records())
    st.session_state.pop(f"{TABLE_KEY}_search", None)
    queue_notification("success", f"Reloaded {len(view.source)} records.")


def main() -> None:
    """Render and run the table presenter demo."""
    st.set_page_config(page_title="Table Presenter", layout="wide")
    init_session_state()

    if not SAMPLE_RECORDS_FILE.exists():
        st.error(f"CSV not found: {SAMPLE_RECORDS_FILE}")
        st.stop()

    try:
        records = load_current_records()
    except (FileNotFoundError, ValueError) as exc:
        st.error(str(exc))
        st.stop()

    def build_view(target: StreamlitTableTarget) -> TableView:
        return TableView(
            target,
            columns=build_columns(),
            data=records,
            page_size=DEFAULT_PAGE_SIZE // 2,
        )

    view = get_table_view(TABLE_KEY, build_view)

    st.markdown("### Records")
    st.button("Reload data", on_click=reload_records, args=(view,))
    show_notifications()
    render_table_view(view, TABLE_KEY)


if __name__ == "__main__":
    main()
