from __future__ import annotations

from fireforce.ui.components.kpi import cards_from_statistics, render_kpi_cards
from fireforce.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    state = context.state
    if not state.has_data:
        return
    render_kpi_cards(cards_from_statistics(state.statistics()), columns=4)
