"""
Application-wide configuration constants and settings loading.

Settings are read from environment variables only. The app entrypoint runs
``fireforce.bootstrap_env.ensure_env`` first so ``st.secrets`` and ``.env``
values are already in the environment; this module stays importable without
Streamlit.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_API_URL = "https://944wkn0pz2.execute-api.eu-north-1.amazonaws.com/default/GetData"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_TITLE = "FireForce"
DEFAULT_SUBTITLE = "Intelligent Fire Safety System"
FALLBACK_ERROR_MESSAGE = "Failed to fetch data from the API"


@dataclass(frozen=True)
class StatCardConfig:
    key: str
    label: str
    icon: str


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered KPI cards; keys match RecordStatistics fields
STAT_CARDS: List[StatCardConfig] = [
    StatCardConfig("total", "Total Records", "🗄️"),
    StatCardConfig("columns", "Data Columns", "👥"),
    StatCardConfig("status_columns", "Status Columns", "⚠️"),
    StatCardConfig("boolean_columns", "Boolean Columns", "✅"),
]

# Ordered page sections below the header
SECTIONS: List[SectionConfig] = [
    SectionConfig("summary", "Summary"),
    SectionConfig("records", "Data Records"),
    SectionConfig("structure", "Data Structure"),
]


@dataclass(frozen=True)
class DashboardConfig:
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    title: str = DEFAULT_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    log_level: str = "INFO"


def _get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


def load_config() -> DashboardConfig:
    raw_timeout = _get_setting("FIREFORCE_REQUEST_TIMEOUT")
    timeout = DEFAULT_REQUEST_TIMEOUT
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise RuntimeError(
                f"FIREFORCE_REQUEST_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None
        if timeout <= 0:
            raise RuntimeError(f"FIREFORCE_REQUEST_TIMEOUT must be positive, got {raw_timeout!r}")

    return DashboardConfig(
        api_url=_get_setting("FIREFORCE_API_URL", DEFAULT_API_URL),
        request_timeout=timeout,
        title=_get_setting("FIREFORCE_TITLE", DEFAULT_TITLE),
        subtitle=_get_setting("FIREFORCE_SUBTITLE", DEFAULT_SUBTITLE),
        log_level=(_get_setting("FIREFORCE_LOG_LEVEL", "INFO") or "INFO").upper(),
    )
