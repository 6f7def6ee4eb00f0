"""
Audit timestamp policy.

All audit columns are TIMESTAMPTZ and always written from the server clock in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

CREATED_AT = "created_at"
UPDATED_AT = "updated_at"

# Keys a caller may send but which are always owned by the server.
SERVER_MANAGED = frozenset({"id", CREATED_AT, UPDATED_AT, "createdAt", "updatedAt"})


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    # Naive inputs are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def stamp_created(values: dict[str, Any], *, with_updated: bool = True) -> dict[str, Any]:
    now = utc_now()
    stamped = {**values, CREATED_AT: now}
    if with_updated:
        stamped[UPDATED_AT] = now
    return stamped


def stamp_updated(values: dict[str, Any]) -> dict[str, Any]:
    return {**values, UPDATED_AT: utc_now()}
