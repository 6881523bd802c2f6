"""Shared utilities: request context and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import (
    RequestIDLogFilter,
    get_request_id,
    reset_request_id,
    set_request_id,
)
from app.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "RequestIDLogFilter",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
