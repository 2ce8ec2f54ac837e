"""Search box component."""

from __future__ import annotations

import streamlit as st

from table_presenter.config import SEARCH_PLACEHOLDER
from table_presenter.services.view_state import TableView


def _apply_search(view: TableView, widget_key: str) -> None:
    view.set_search_term(st.session_state.get(widget_key, ""))


def render_search(view: TableView, key: str) -> None:
    """Render the search input; edits are pushed into the view on change."""
    widget_key = f"{key}_search"
    st.text_input(
        "Search",
        value=view.search_term,
        key=widget_key,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
        on_change=_apply_search,
        args=(view, widget_key),
    )
