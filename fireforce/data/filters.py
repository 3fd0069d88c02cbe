"""
Free-text search across every field of the fetched records.
"""

from __future__ import annotations

from typing import List, Sequence

from fireforce.data.schema import Record
from fireforce.utils.formatting import stringify_value


def record_matches(record: Record, needle: str) -> bool:
    return any(
        needle in stringify_value(value).lower()
        for value in record.values()
        if value is not None
    )


def filter_records(records: Sequence[Record], term: str) -> List[Record]:
    """Keep records where any field contains ``term``, case-insensitively.

    The scan covers every field of every record, including fields outside the
    inferred schema. An empty term returns all records.
    """
    if not term:
        return list(records)
    needle = term.lower()
    return [record for record in records if record_matches(record, needle)]
