"""
Helpers for building and rendering the records table with badge styling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd
import streamlit as st

from fireforce.data.schema import Record
from fireforce.ui.components.formatting import ClassifiedValue, classify_value, format_column_name

BADGE_STYLES = {
    "destructive": "background-color: #fee2e2; color: #b91c1c; font-weight: 600;",
    "success": "background-color: #dcfce7; color: #15803d; font-weight: 600;",
    "secondary": "background-color: #f1f5f9; color: #334155;",
}


@dataclass
class TableView:
    columns: List[str]
    labels: List[str]
    rows: List[List[ClassifiedValue]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def build_table_view(records: Sequence[Record], schema: Sequence[str]) -> TableView:
    """Classify every cell of ``records`` against the inferred ``schema``.

    Fields outside the schema are not shown; schema fields missing from a
    record are classified from ``None``.
    """
    columns = list(schema)
    rows = [[classify_value(record.get(column), column) for column in columns] for record in records]
    return TableView(columns=columns, labels=[format_column_name(c) for c in columns], rows=rows)


def _to_frames(view: TableView):
    text = pd.DataFrame(
        [[cell.text for cell in row] for row in view.rows],
        columns=view.columns,
        dtype=object,
    )
    styles = pd.DataFrame(
        [[BADGE_STYLES.get(cell.variant or "", "") for cell in row] for row in view.rows],
        columns=view.columns,
        dtype=object,
    )
    return text, styles


def render_table(
    view: TableView,
    height: int = 500,
    empty_message: Optional[str] = None,
) -> None:
    if not view.rows:
        st.info(empty_message or "No data available")
        return

    text_df, style_df = _to_frames(view)
    styled = text_df.style.apply(lambda _: style_df, axis=None)
    st.dataframe(
        styled,
        width="stretch",
        height=height,
        hide_index=True,
        column_config={
            column: st.column_config.TextColumn(label)
            for column, label in zip(view.columns, view.labels)
        },
    )
