"""Quick validation script for the record-shaping pipeline.

Run with `python scripts/validate_pipeline.py` to push a sample API response
through unwrapping, schema inference, classification and statistics without
starting Streamlit or touching the network.
"""

from __future__ import annotations

from fireforce.data.filters import filter_records
from fireforce.data.loader import extract_records
from fireforce.data.schema import infer_schema
from fireforce.data.stats import compute_statistics
from fireforce.ui.components.formatting import CellKind
from fireforce.ui.components.tables import build_table_view


def main() -> None:
    sample = {
        "Items": [
            {
                "device_id": "ff-001",
                "status": "alert",
                "panic_button": True,
                "fall_detected": "0",
                "latitude": "-8.409518",
                "longitude": 115.188919,
                "event_time": "2024-06-01T08:30:00Z",
            },
            {
                "device_id": "ff-002",
                "status": "normal",
                "panic_button": False,
                "fall_detected": "1",
                "latitude": "-8.65",
                "longitude": 115.2167,
                "event_time": "not recorded",
            },
        ]
    }

    records = extract_records(sample)
    schema = infer_schema(records)
    view = build_table_view(records, schema)
    stats = compute_statistics(schema, records)

    expected_labels = [
        "Device Id",
        "Status",
        "Panic Button",
        "Fall Detected",
        "Latitude",
        "Longitude",
        "Event Time",
    ]
    if view.labels != expected_labels:
        raise SystemExit(f"Unexpected column labels: {view.labels}")

    first, second = view.rows
    assert first[1].kind is CellKind.STATUS_DANGER, "alert status should render as danger badge"
    assert first[2].kind is CellKind.ALERT, "panic flag should render as ALERT"
    assert second[3].kind is CellKind.FALL_DETECTED, "fall flag should render as FALL DETECTED"
    assert first[4].text == "-8.409518", "latitude should keep 6 decimals"
    assert second[6].kind is CellKind.PLAIN_TEXT, "unparseable time should fall back to text"
    assert stats.boolean_columns == 2, "panic_button and fall_detected are boolean-like"
    assert len(filter_records(records, "FF-002")) == 1, "search should be case-insensitive"

    print("Pipeline validation passed. Rows:", view.row_count, "Stats:", stats.as_dict())


if __name__ == "__main__":
    main()
