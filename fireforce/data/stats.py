"""
Summary counts shown in the KPI cards above the records table.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from itertools import islice
from typing import Any, Dict, List, Sequence, Tuple

from fireforce.config import STAT_CARDS
from fireforce.data.schema import Record

BOOLEAN_SAMPLE_SIZE = 10
STATUS_COLUMN_HINTS = ("status", "state", "alert")
BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


@dataclass(frozen=True)
class RecordStatistics:
    total: int
    columns: int
    status_columns: int
    boolean_columns: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def is_status_column(column: str) -> bool:
    lowered = column.lower()
    return any(hint in lowered for hint in STATUS_COLUMN_HINTS)


def _looks_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value in BOOLEAN_STRINGS


def is_boolean_column(column: str, sample: Sequence[Record]) -> bool:
    return any(_looks_boolean(record.get(column)) for record in sample)


def compute_statistics(schema: Sequence[str], records: Sequence[Record]) -> RecordStatistics:
    """Count records, columns, status-like and boolean-like columns.

    Boolean detection only looks at the first ``BOOLEAN_SAMPLE_SIZE`` records,
    so large responses stay cheap to summarise.
    """
    sample = list(islice(records, BOOLEAN_SAMPLE_SIZE))
    return RecordStatistics(
        total=len(records),
        columns=len(schema),
        status_columns=sum(1 for column in schema if is_status_column(column)),
        boolean_columns=sum(1 for column in schema if is_boolean_column(column, sample)),
    )


def summary_items(stats: RecordStatistics) -> List[Tuple[str, int]]:
    values = stats.as_dict()
    return [(card.label, values[card.key]) for card in STAT_CARDS]
