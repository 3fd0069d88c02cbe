"""
Layout helpers for the Streamlit application (header, banners, empty state).
"""

from __future__ import annotations

import streamlit as st

from fireforce.config import DashboardConfig

LOADING_MESSAGE = "Fetching data from API..."


def setup_page(config: DashboardConfig) -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=config.title,
        layout="wide",
        page_icon="🛡️",
    )


def render_header(config: DashboardConfig, loading: bool = False) -> bool:
    """Draw the title row; returns True when Refresh Data was clicked."""
    col_title, col_action = st.columns([5, 1], vertical_alignment="center")
    with col_title:
        st.title(f"🛡️ {config.title}")
        st.caption(config.subtitle)
    with col_action:
        return st.button("🔄 Refresh Data", key="ff_refresh", disabled=loading)


def render_error_banner(message: str) -> bool:
    col_message, col_retry = st.columns([6, 1], vertical_alignment="center")
    with col_message:
        st.error(message, icon="⚠️")
    with col_retry:
        return st.button("Retry", key="ff_retry")


def render_empty_state() -> bool:
    with st.container(border=True):
        st.markdown("### No Data Available")
        st.write("No records found from the API endpoint.")
        return st.button("🔄 Try Again", key="ff_try_again")
