from __future__ import annotations

import streamlit as st

from fireforce.ui.components.formatting import describe_schema
from fireforce.ui.pages.context import PageContext

GRID_COLUMNS = 4


def render(context: PageContext) -> None:
    schema = context.state.schema
    if not schema:
        return

    with st.container(border=True):
        st.subheader("Data Structure")
        st.caption("Available columns in your dataset")
        entries = describe_schema(schema)
        for idx in range(0, len(entries), GRID_COLUMNS):
            row = entries[idx: idx + GRID_COLUMNS]
            for col, (position, label) in zip(st.columns(GRID_COLUMNS), row):
                with col:
                    st.markdown(f"`{position}. {label}`")
