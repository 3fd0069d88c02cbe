"""
Cell classification and label formatting for the records table.

A cell's display category depends on both its value and its column name. The
rules below are evaluated in order and the first one that produces a value
wins, so numeric 0/1 always render as boolean badges even in status or
coordinate columns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

import pandas as pd

from fireforce.utils.formatting import is_number, parse_leading_float, stringify_value

MISSING_TEXT = "N/A"
TIMESTAMP_FORMAT = "%x %X"
COORDINATE_DECIMALS = 6

ALERT_COLUMN_HINTS = ("panic", "alert", "emergency")
FALL_COLUMN_HINTS = ("fall",)
ACTIVE_COLUMN_HINTS = ("active", "online")
TIME_COLUMN_HINTS = ("time", "date")
COORDINATE_COLUMN_HINTS = ("lat", "lng", "long")
STATUS_COLUMN_HINTS = ("status", "state")
DANGER_STATUS_WORDS = ("alert", "danger", "critical")
NORMAL_STATUS_WORDS = ("normal", "ok", "safe")


class CellKind(str, Enum):
    ALERT = "alert"
    FALL_DETECTED = "fall_detected"
    ACTIVE = "active"
    BOOLEAN_TRUE = "boolean_true"
    BOOLEAN_FALSE = "boolean_false"
    STATUS_DANGER = "status_danger"
    STATUS_NORMAL = "status_normal"
    STATUS_GENERIC = "status_generic"
    FORMATTED_TIMESTAMP = "formatted_timestamp"
    FORMATTED_COORDINATE = "formatted_coordinate"
    PLAIN_TEXT = "plain_text"
    MISSING = "missing"


BADGE_VARIANTS = {
    CellKind.ALERT: "destructive",
    CellKind.FALL_DETECTED: "destructive",
    CellKind.STATUS_DANGER: "destructive",
    CellKind.ACTIVE: "success",
    CellKind.STATUS_NORMAL: "success",
    CellKind.BOOLEAN_TRUE: "secondary",
    CellKind.BOOLEAN_FALSE: "secondary",
    CellKind.STATUS_GENERIC: "secondary",
}


@dataclass(frozen=True)
class ClassifiedValue:
    kind: CellKind
    text: str
    column: str
    raw: Any = None

    @property
    def variant(self) -> Optional[str]:
        return BADGE_VARIANTS.get(self.kind)

    @property
    def is_badge(self) -> bool:
        return self.kind in BADGE_VARIANTS


@dataclass(frozen=True)
class _Cell:
    value: Any
    column: str
    column_lower: str
    text: str

    @property
    def text_lower(self) -> str:
        return self.text.lower()

    def column_has(self, hints: Sequence[str]) -> bool:
        return any(hint in self.column_lower for hint in hints)

    def make(self, kind: CellKind, text: Optional[str] = None) -> ClassifiedValue:
        return ClassifiedValue(kind=kind, text=self.text if text is None else text, column=self.column, raw=self.value)


def _is_missing(cell: _Cell) -> bool:
    return cell.value is None


def _is_truthy(cell: _Cell) -> bool:
    value = cell.value
    return (
        cell.text_lower == "true"
        or value is True
        or (is_number(value) and value == 1)
        or value == "1"
    )


def _is_falsy(cell: _Cell) -> bool:
    value = cell.value
    return (
        cell.text_lower == "false"
        or value is False
        or (is_number(value) and value == 0)
        or value == "0"
    )


def _missing(cell: _Cell) -> ClassifiedValue:
    return cell.make(CellKind.MISSING, MISSING_TEXT)


def _truthy_badge(cell: _Cell) -> ClassifiedValue:
    if cell.column_has(ALERT_COLUMN_HINTS):
        return cell.make(CellKind.ALERT, "ALERT")
    if cell.column_has(FALL_COLUMN_HINTS):
        return cell.make(CellKind.FALL_DETECTED, "FALL DETECTED")
    if cell.column_has(ACTIVE_COLUMN_HINTS):
        return cell.make(CellKind.ACTIVE, "ACTIVE")
    return cell.make(CellKind.BOOLEAN_TRUE, "TRUE")


def _falsy_badge(cell: _Cell) -> ClassifiedValue:
    return cell.make(CellKind.BOOLEAN_FALSE, "Normal")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp-like value; numbers are epoch milliseconds."""
    try:
        if is_number(value):
            parsed = pd.to_datetime(value, unit="ms", utc=True, errors="coerce")
        else:
            parsed = pd.to_datetime(stringify_value(value), errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if parsed is None or pd.isna(parsed):
        return None
    result = parsed.to_pydatetime()
    if result.tzinfo is not None:
        # Aware timestamps are shown in the viewer's local time
        result = result.astimezone()
    return result


def _timestamp(cell: _Cell) -> Optional[ClassifiedValue]:
    parsed = parse_timestamp(cell.value)
    if parsed is None:
        return None
    return cell.make(CellKind.FORMATTED_TIMESTAMP, parsed.strftime(TIMESTAMP_FORMAT))


def _coordinate(cell: _Cell) -> Optional[ClassifiedValue]:
    number = parse_leading_float(cell.value)
    if number is None:
        return None
    return cell.make(CellKind.FORMATTED_COORDINATE, f"{number:.{COORDINATE_DECIMALS}f}")


def _status_badge(cell: _Cell) -> ClassifiedValue:
    text = cell.text_lower
    if any(word in text for word in DANGER_STATUS_WORDS):
        return cell.make(CellKind.STATUS_DANGER)
    if any(word in text for word in NORMAL_STATUS_WORDS):
        return cell.make(CellKind.STATUS_NORMAL)
    return cell.make(CellKind.STATUS_GENERIC)


Rule = Tuple[Callable[[_Cell], bool], Callable[[_Cell], Optional[ClassifiedValue]]]

CLASSIFICATION_RULES: List[Rule] = [
    (_is_missing, _missing),
    (_is_truthy, _truthy_badge),
    (_is_falsy, _falsy_badge),
    (lambda cell: cell.column_has(TIME_COLUMN_HINTS), _timestamp),
    (lambda cell: cell.column_has(COORDINATE_COLUMN_HINTS), _coordinate),
    (lambda cell: cell.column_has(STATUS_COLUMN_HINTS), _status_badge),
]


def classify_value(value: Any, column: str) -> ClassifiedValue:
    cell = _Cell(
        value=value,
        column=column,
        column_lower=column.lower(),
        text="" if value is None else stringify_value(value),
    )
    for matches, produce in CLASSIFICATION_RULES:
        if not matches(cell):
            continue
        result = produce(cell)
        if result is not None:
            return result
    return cell.make(CellKind.PLAIN_TEXT)


def format_column_name(name: str) -> str:
    """``"device_id"`` -> ``"Device Id"``; empty tokens are kept as-is."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in re.split(r"[_-]", name))


def describe_schema(schema: Sequence[str]) -> List[Tuple[int, str]]:
    """Return ``(position, label)`` pairs for the Data Structure panel, 1-based."""
    return [(idx, format_column_name(column)) for idx, column in enumerate(schema, start=1)]
