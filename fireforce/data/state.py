"""
Dashboard state and the fetch lifecycle that owns it.

``FetchOrchestrator`` is the only writer of the fetch-related fields
(records, schema, status, error). The search term is written through
``set_search_term``. Everything else the page shows is derived from this state
on every render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, List, Optional

from fireforce.config import DEFAULT_REQUEST_TIMEOUT, FALLBACK_ERROR_MESSAGE
from fireforce.data.errors import FetchError
from fireforce.data.filters import filter_records
from fireforce.data.loader import fetch_records
from fireforce.data.schema import Record, Schema, infer_schema
from fireforce.data.stats import RecordStatistics, compute_statistics

log = logging.getLogger(__name__)

Fetcher = Callable[[str], List[Record]]


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class DashboardState:
    records: List[Record] = field(default_factory=list)
    schema: Schema = field(default_factory=list)
    status: FetchStatus = FetchStatus.IDLE
    error: Optional[str] = None
    search_term: str = ""

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def has_data(self) -> bool:
        return bool(self.records)

    def filtered_records(self) -> List[Record]:
        return filter_records(self.records, self.search_term)

    def statistics(self) -> RecordStatistics:
        return compute_statistics(self.schema, self.records)


class FetchOrchestrator:
    """Runs fetches against ``url`` and applies the result to ``state``.

    ``fetch`` takes the URL and returns the unwrapped record list, raising
    ``FetchError`` on failure. It defaults to an HTTP GET via ``requests``.
    """

    def __init__(
        self,
        url: str,
        fetch: Optional[Fetcher] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        state: Optional[DashboardState] = None,
    ) -> None:
        self.url = url
        self.fetch = fetch or partial(fetch_records, timeout=timeout)
        self.state = state or DashboardState()

    @property
    def needs_initial_load(self) -> bool:
        return self.state.status is FetchStatus.IDLE

    def set_search_term(self, term: str) -> None:
        self.state.search_term = term or ""

    def refresh(self) -> bool:
        """Fetch once and update the state. Returns True on success.

        A refresh requested while another is in flight is ignored. On failure
        the previous records and schema stay in place next to the error.
        """
        state = self.state
        if state.loading:
            log.info("Refresh ignored; a fetch is already in progress")
            return False

        previous_status, previous_error = state.status, state.error
        state.status = FetchStatus.LOADING
        state.error = None
        log.info("Fetching records from %s", self.url)
        try:
            records = self.fetch(self.url)
        except FetchError as exc:
            log.error("API fetch error: %s", exc)
            state.error = str(exc) or FALLBACK_ERROR_MESSAGE
            state.status = FetchStatus.FAILURE
            return False
        except Exception as exc:
            log.exception("Unexpected error while fetching records")
            state.error = str(exc) or FALLBACK_ERROR_MESSAGE
            state.status = FetchStatus.FAILURE
            return False
        except BaseException:
            # Script stop/rerun: leave the guard open for the next run
            state.status, state.error = previous_status, previous_error
            raise

        state.records = list(records)
        state.schema = infer_schema(state.records)
        state.status = FetchStatus.SUCCESS
        log.info("Loaded %d records with %d columns", len(state.records), len(state.schema))
        return True
