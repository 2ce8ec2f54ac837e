"""Pagination controls component."""

from __future__ import annotations

import streamlit as st

from table_presenter.config import NEXT_LABEL, PREVIOUS_LABEL
from table_presenter.models import TableSnapshot
from table_presenter.services.view_state import TableView


def render_pagination(view: TableView, snapshot: TableSnapshot, key: str) -> None:
    """Render the item caption and the windowed page buttons."""
    st.caption(snapshot.caption)
    if not snapshot.pagination_tokens or snapshot.previous is None or snapshot.next is None:
        return

    slots = st.columns(len(snapshot.pagination_tokens) + 2)
    with slots[0]:
        st.button(
            PREVIOUS_LABEL,
            key=f"{key}_page_prev",
            disabled=snapshot.previous.disabled,
            on_click=view.set_page,
            args=(snapshot.previous.page,),
        )

    for index, token in enumerate(snapshot.pagination_tokens, start=1):
        with slots[index]:
            if snapshot.is_ellipsis(token):
                st.markdown(str(token))
                continue
            st.button(
                str(token),
                key=f"{key}_page_{token}",
                type="primary" if token == snapshot.current_page else "secondary",
                on_click=view.set_page,
                args=(token,),
            )

    with slots[-1]:
        st.button(
            NEXT_LABEL,
            key=f"{key}_page_next",
            disabled=snapshot.next.disabled,
            on_click=view.set_page,
            args=(snapshot.next.page,),
        )
