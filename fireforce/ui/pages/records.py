from __future__ import annotations

import streamlit as st

from fireforce.ui.components.tables import build_table_view, render_table
from fireforce.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    state = context.state
    if not state.has_data:
        return

    with st.container(border=True):
        col_heading, col_search = st.columns([3, 2], vertical_alignment="bottom")
        with col_search:
            term = st.text_input(
                "Search",
                placeholder="Search all data...",
                key="ff_search_term",
                label_visibility="collapsed",
            )
        context.orchestrator.set_search_term(term)
        filtered = state.filtered_records()

        with col_heading:
            st.subheader("Data Records")
            st.caption(
                f"Showing {len(filtered):,} of {len(state.records):,} records "
                f"with {len(state.schema)} columns"
            )

        empty_message = "No records match your search" if state.search_term else "No data available"
        render_table(build_table_view(filtered, state.schema), empty_message=empty_message)
