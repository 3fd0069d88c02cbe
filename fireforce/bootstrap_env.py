"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD),
  so a ``[fireforce]`` table with ``api_url`` becomes FIREFORCE_API_URL
- Finally, load .env (without overriding existing env vars)
"""

from __future__ import annotations

import os
import re
from typing import Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv


def _sanitize_key(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val) -> Iterator[Tuple[str, str]]:
    if isinstance(val, dict):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def _bridge_secrets_to_env() -> None:
    try:
        # st.secrets raises outside the Streamlit runtime when no secrets.toml exists
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return
        secrets_dict = secrets.to_dict()
    except Exception:
        return
    for key, value in secrets_dict.items():
        for flat_key, flat_value in _flatten_secrets(key, value):
            os.environ.setdefault(flat_key, flat_value)


def ensure_env() -> None:
    """Idempotent: bridge secrets then load ``.env`` without overriding."""
    _bridge_secrets_to_env()
    load_dotenv()
