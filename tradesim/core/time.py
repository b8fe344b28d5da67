"""tradesim.core.time

Instants are aware UTC datetimes. Everything else is converted at the edge.
"""

from __future__ import annotations

from datetime import UTC, datetime


def ensure_utc(dt: datetime) -> datetime:
    """Naive datetimes are assumed UTC; aware ones are converted."""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_dt(value: str) -> datetime:
    """Parse an ISO-8601 datetime string into an aware UTC datetime.

    Accepts:
    - `Z` suffix
    - explicit offsets
    - naive timestamps (assumed UTC)
    - plain dates (midnight UTC)

    Raises:
        ValueError: if parsing fails.
    """

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"

    return ensure_utc(datetime.fromisoformat(v))
