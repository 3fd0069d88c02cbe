from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

import requests
from requests import RequestException

from fireforce.data.errors import DecodeError, HttpStatusError, TransportError
from fireforce.data.schema import Record

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

# Wrapper keys that may hold the record array, checked in this order.
# "Items" is what a DynamoDB scan proxied through API Gateway returns.
RECORD_KEYS: Tuple[str, ...] = ("data", "records", "Items")


def extract_records(payload: Any) -> List[Record]:
    """Unwrap the record array from a decoded JSON response.

    Accepts a bare array or an object with a ``data``/``records``/``Items``
    array. Any other shape yields an empty list rather than an error.
    """
    rows: Optional[list] = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, Mapping):
        rows = next(
            (payload[key] for key in RECORD_KEYS if isinstance(payload.get(key), list)),
            None,
        )
    if rows is None:
        return []

    records = [dict(row) for row in rows if isinstance(row, Mapping)]
    dropped = len(rows) - len(records)
    if dropped:
        log.warning("Dropped %d non-object rows from API response", dropped)
    return records


def fetch_payload(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> Any:
    """GET ``url`` and return the decoded JSON body."""
    http = session or requests
    try:
        response = http.get(url, timeout=timeout)
    except RequestException as exc:
        raise TransportError(str(exc)) from exc

    # 3xx that requests did not follow (e.g. 304) carries no usable body
    if not 200 <= response.status_code < 300:
        raise HttpStatusError(response.status_code)

    try:
        return response.json()
    except (ValueError, RecursionError) as exc:
        raise DecodeError(str(exc)) from exc


def fetch_records(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> List[Record]:
    return extract_records(fetch_payload(url, timeout=timeout, session=session))
