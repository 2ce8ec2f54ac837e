"""Streamlit render adapter for table view snapshots."""

from __future__ import annotations

from typing import Callable, Optional

import pandas as pd
import streamlit as st

from table_presenter.components.pagination import render_pagination
from table_presenter.components.search import render_search
from table_presenter.config import SORT_INDICATORS
from table_presenter.models import HeaderCell, TableSnapshot
from table_presenter.services.view_state import TableView


class StreamlitTableTarget:
    """Render target that keeps the latest snapshot for the next script run.

    Streamlit widget callbacks run before the script reruns, so snapshots are
    stored here and drawn by :func:`render_table_view` in page order.
    """

    def __init__(self) -> None:
        self.snapshot: Optional[TableSnapshot] = None
        self.render_count = 0

    def __call__(self, snapshot: TableSnapshot, view: TableView) -> None:
        del view
        self.snapshot = snapshot
        self.render_count += 1


def get_table_view(key: str, factory: Callable[[StreamlitTableTarget], TableView]) -> TableView:
    """Fetch the view for ``key`` from session state, creating it once."""
    state_key = f"{key}_table_view"
    if state_key not in st.session_state:
        st.session_state[state_key] = factory(StreamlitTableTarget())
    return st.session_state[state_key]


def header_label(header: HeaderCell) -> str:
    """Return the header text with its sort indicator."""
    indicator = SORT_INDICATORS.get(header.sort_direction, "")
    return f"{header.label} {indicator}".strip()


def snapshot_dataframe(snapshot: TableSnapshot) -> pd.DataFrame:
    """Build the display dataframe for the current page."""
    labels = [header.label for header in snapshot.headers]
    return pd.DataFrame(snapshot.cell_rows(), columns=labels)


def render_table_header(view: TableView, snapshot: TableSnapshot, key: str) -> None:
    """Render one sort button per sortable column."""
    slots = st.columns(len(snapshot.headers))
    for slot, header in zip(slots, snapshot.headers):
        with slot:
            if not header.sortable:
                st.markdown(f"**{header.label}**")
                continue
            st.button(
                header_label(header),
                key=f"{key}_sort_{header.key}",
                on_click=view.set_sort,
                args=(header.key,),
            )


def render_table_view(view: TableView, key: str) -> Optional[TableSnapshot]:
    """Draw search, table and pagination for the view's latest snapshot."""
    snapshot = view.snapshot
    if snapshot is None:
        return None

    if snapshot.show_search:
        render_search(view, key)

    if snapshot.is_empty:
        st.info(snapshot.empty_message)
        return snapshot

    render_table_header(view, snapshot, key)
    st.dataframe(snapshot_dataframe(snapshot), hide_index=True, width="stretch")
    render_pagination(view, snapshot, key)
    return snapshot
