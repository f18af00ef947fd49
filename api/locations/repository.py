"""
Location queries (raw SQL).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from core import clock, db
from core.query import Predicate, build_select

# 30 days by default; capped at roughly 1000 years so the threshold stays a valid datetime.
MAX_MAINTENANCE_HOURS = 24 * 365 * 1000
DEFAULT_MAINTENANCE_HOURS = 720

LOCATION_COLUMNS = """
SELECT l.location, l.park_id, l.maintenance_performed
FROM locations l
"""


async def find_location(name: str, park_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        LOCATION_COLUMNS.strip() + "\nWHERE l.location = $1\n  AND l.park_id = $2",
        name,
        park_id,
    )


async def list_locations(park_id: int | None = None) -> list[dict[str, Any]]:
    """
    Most recently maintained first; NULL placement is left to Postgres.
    """
    predicates: list[Predicate] = []
    if park_id is not None:
        predicates.append(Predicate("l.park_id = {}", (park_id,)))
    sql, args = build_select(
        LOCATION_COLUMNS,
        predicates,
        order_by="l.maintenance_performed DESC",
    )
    return await db.fetch_all(sql, *args)


def maintenance_threshold(hours_threshold: int, *, now: datetime) -> datetime:
    return now - timedelta(hours=hours_threshold)


async def list_locations_needing_maintenance(
    hours_threshold: int = DEFAULT_MAINTENANCE_HOURS,
    *,
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    """
    Locations never maintained, or last maintained before now - hours_threshold.
    Never-maintained locations come first.
    """
    threshold = maintenance_threshold(hours_threshold, now=now or clock.utcnow())
    sql, args = build_select(
        LOCATION_COLUMNS,
        [
            Predicate(
                "(l.maintenance_performed IS NULL OR l.maintenance_performed < {})",
                (threshold,),
            )
        ],
        order_by="l.maintenance_performed ASC NULLS FIRST",
    )
    return await db.fetch_all(sql, *args)
