"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request ID) so log
lines written anywhere during a request can be correlated.

Usage:
    token = set_request_id("abc123")
    ...
    reset_request_id(token)
"""

import logging
from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> Token:
    """Bind request_id to the current async task; returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the request ID of the request being handled, if any."""
    return _request_id.get()


class RequestIDLogFilter(logging.Filter):
    """Attach request_id to every log record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True
