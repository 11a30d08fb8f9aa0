"""Errors raised by f1results.

Only the HTTP transport and response validation raise these. Everything
above them either lets an :class:`F1ResultsError` propagate or turns it
into an absent value, a skipped meeting, or a message.
"""

from __future__ import annotations


class F1ResultsError(Exception):
    """Base class; catching it covers every failure to get race data."""


class F1ConnectionError(F1ResultsError):
    """The service could not be reached or the exchange broke off mid-way."""


class F1TimeoutError(F1ResultsError):
    """The service did not answer within the configured timeout."""


class F1APIError(F1ResultsError):
    """The service answered, but not with a 2xx JSON body of rows."""

    def __init__(self, status_code: int, message: str, url: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f"HTTP {status_code}: {message}")


class F1ValidationError(F1ResultsError):
    """Rows were returned but do not fit the expected record model."""
