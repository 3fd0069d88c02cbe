import streamlit as st

from fireforce.bootstrap_env import ensure_env
from fireforce.config import SECTIONS, DashboardConfig, load_config
from fireforce.data.state import FetchOrchestrator
from fireforce.ui.layout import (
    LOADING_MESSAGE,
    render_empty_state,
    render_error_banner,
    render_header,
    setup_page,
)
from fireforce.ui.pages import records, structure, summary
from fireforce.ui.pages.context import PageContext
from fireforce.utils.logging import setup_logging


PAGE_RENDERERS = {
    "summary": summary.render,
    "records": records.render,
    "structure": structure.render,
}

ORCHESTRATOR_KEY = "ff_orchestrator"


def _get_orchestrator(config: DashboardConfig) -> FetchOrchestrator:
    # One orchestrator per browser session, rebuilt if the endpoint changes
    orchestrator = st.session_state.get(ORCHESTRATOR_KEY)
    if orchestrator is None or orchestrator.url != config.api_url:
        orchestrator = FetchOrchestrator(config.api_url, timeout=config.request_timeout)
        st.session_state[ORCHESTRATOR_KEY] = orchestrator
    return orchestrator


def _refresh(orchestrator: FetchOrchestrator) -> None:
    with st.spinner(LOADING_MESSAGE):
        orchestrator.refresh()


def main() -> None:
    ensure_env()
    config = load_config()
    setup_logging(config.log_level)
    setup_page(config)

    orchestrator = _get_orchestrator(config)
    state = orchestrator.state

    if render_header(config, loading=state.loading) or orchestrator.needs_initial_load:
        _refresh(orchestrator)

    if state.error and render_error_banner(state.error):
        _refresh(orchestrator)
        st.rerun()

    context = PageContext(orchestrator=orchestrator, config=config)
    for section in SECTIONS:
        renderer = PAGE_RENDERERS.get(section.key)
        if renderer is None:
            continue
        renderer(context)

    if not state.has_data and not state.error and render_empty_state():
        _refresh(orchestrator)
        st.rerun()


if __name__ == "__main__":
    main()
