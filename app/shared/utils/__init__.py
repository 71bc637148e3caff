"""Shared utilities: date variable conversion, id generation."""

from app.shared.utils.datetime import (
    ensure_utc,
    from_timestamp_ms_utc,
    to_timestamp_ms,
)
from app.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "from_timestamp_ms_utc",
    "generate_cuid",
    "to_timestamp_ms",
]
