"""
Dinosaur business logic.

Scope:
- map optional query-string flags to a `DinosaurFilters` value
- run the repository queries with one clock reading per request
- shape rows for the API, including the derived `is_hungry` flag
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from core import clock

from . import repository
from .repository import DinosaurFilters

logger = logging.getLogger(__name__)


def parse_flag(raw: str | None) -> bool | None:
    """
    Query-string flag: absent or empty means "no filter", the literal "true"
    means True and anything else means False.
    """
    if raw is None or raw == "":
        return None
    return raw == "true"


def filters_from_query(
    *,
    active: str | None = None,
    hungry: str | None = None,
    herbivore: str | None = None,
) -> DinosaurFilters:
    return DinosaurFilters(
        active=parse_flag(active),
        hungry=parse_flag(hungry),
        herbivore=parse_flag(herbivore),
    )


def is_hungry(last_fed_at: datetime | None, digestion_period_in_hours: Any, *, now: datetime) -> bool:
    if last_fed_at is None:
        return True
    return last_fed_at + timedelta(hours=float(digestion_period_in_hours)) <= now


def _to_api(row: dict[str, Any], *, now: datetime) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "name": str(row["name"]),
        "is_active": bool(row["is_active"]),
        "herbivore": bool(row["herbivore"]),
        "last_fed_at": row["last_fed_at"],
        "digestion_period_in_hours": float(row["digestion_period_in_hours"]),
        "added_at": row["added_at"],
        "is_hungry": is_hungry(row["last_fed_at"], row["digestion_period_in_hours"], now=now),
    }


async def list_dinosaurs(filters: DinosaurFilters, *, now: datetime | None = None) -> list[dict[str, Any]]:
    now = now or clock.utcnow()
    rows = await repository.list_dinosaurs(filters, now=now)
    logger.debug(
        "dinosaurs_listed active=%s hungry=%s herbivore=%s count=%s",
        filters.active,
        filters.hungry,
        filters.herbivore,
        len(rows),
    )
    return [_to_api(row, now=now) for row in rows]


async def get_dinosaur(dinosaur_id: int, *, now: datetime | None = None) -> dict[str, Any] | None:
    row = await repository.get_dinosaur(dinosaur_id)
    if row is None:
        return None
    return _to_api(row, now=now or clock.utcnow())


async def active_dinosaur_count() -> dict[str, int]:
    return {"active_count": await repository.count_active_dinosaurs()}
