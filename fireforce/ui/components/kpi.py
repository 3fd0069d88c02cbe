from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from fireforce.config import STAT_CARDS
from fireforce.data.stats import RecordStatistics, summary_items


@dataclass
class KpiCard:
    label: str
    value: Optional[int] = None
    icon: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value is None:
        return "–"
    return f"{card.value:,}"


def cards_from_statistics(stats: RecordStatistics) -> list[KpiCard]:
    return [
        KpiCard(label=label, value=value, icon=card.icon)
        for card, (label, value) in zip(STAT_CARDS, summary_items(stats))
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                label = f"{card.icon} {card.label}" if card.icon else card.label
                st.metric(label=label, value=_format_value(card), border=True)
