"""
Location orchestration: grid occupancy from Redis, stored rows from Postgres.
"""

from __future__ import annotations

import logging
from typing import Any

from . import repository
from .occupancy import CarnivoreLocationCounter, get_grid_location_names

logger = logging.getLogger(__name__)


def _to_api(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "location": str(row["location"]),
        "park_id": int(row["park_id"]),
        "maintenance_performed": row["maintenance_performed"],
    }


async def grid_status(counter: CarnivoreLocationCounter) -> list[dict[str, Any]]:
    names = get_grid_location_names()
    counts = await counter.get_counts(names)
    logger.debug("grid_status locations=%s returned=%s", len(names), len(counts))
    return counts


async def locations_needing_maintenance(
    hours_threshold: int = repository.DEFAULT_MAINTENANCE_HOURS,
) -> list[dict[str, Any]]:
    rows = await repository.list_locations_needing_maintenance(hours_threshold)
    return [_to_api(row) for row in rows]


async def list_locations(park_id: int | None = None) -> list[dict[str, Any]]:
    rows = await repository.list_locations(park_id)
    return [_to_api(row) for row in rows]


async def find_location(name: str, park_id: int) -> dict[str, Any] | None:
    row = await repository.find_location(name, park_id)
    return _to_api(row) if row is not None else None
