"""
Errors raised while fetching records from the API endpoint.

Every failure mode is a ``FetchError`` so the orchestrator can catch them at
one boundary and show the message in the error banner.
"""

from __future__ import annotations


class FetchError(Exception):
    """Base class for fetch failures shown to the user."""


class TransportError(FetchError):
    """The endpoint could not be reached (DNS, refused connection, timeout)."""


class HttpStatusError(FetchError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class DecodeError(FetchError):
    """The response body was not valid JSON."""
