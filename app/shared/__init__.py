"""Shared helpers used by application and infrastructure (no business logic)."""

from app.shared.context import get_request_id
from app.shared.utils import (
    ensure_utc,
    from_timestamp_ms_utc,
    generate_cuid,
    to_timestamp_ms,
)

__all__ = [
    "ensure_utc",
    "from_timestamp_ms_utc",
    "generate_cuid",
    "get_request_id",
    "to_timestamp_ms",
]
