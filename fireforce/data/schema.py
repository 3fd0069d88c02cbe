"""
Schema inference for open-ended API records.

The first record is treated as representative of the whole response: its keys,
in insertion order, become the table columns. Fields that only appear on later
records are not shown, and fields missing from later records render as "N/A".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

Record = Dict[str, Any]
Schema = List[str]


def infer_schema(records: Sequence[Record]) -> Schema:
    if not records:
        return []
    first = records[0]
    if not isinstance(first, Mapping):
        return []
    return list(first.keys())
