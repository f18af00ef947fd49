"""
Dinosaur queries (raw SQL).

Filters are expressed as a `DinosaurFilters` value and turned into a list of
predicates; one function compiles them into a single SELECT.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from core import clock, db
from core.query import Predicate, build_select

DINOSAUR_COLUMNS = """
SELECT d.id, d.name, d.is_active, d.herbivore, d.last_fed_at,
       d.digestion_period_in_hours, d.added_at
FROM dinosaurs d
"""

NEWEST_FIRST = "d.added_at DESC"


@dataclass(frozen=True)
class DinosaurFilters:
    active: bool | None = None
    hungry: bool | None = None
    herbivore: bool | None = None


def hungry_predicate(now: datetime) -> Predicate:
    # Inclusive boundary: fed exactly digestion_period_in_hours ago is hungry.
    return Predicate(
        "(d.last_fed_at IS NULL"
        " OR d.last_fed_at + d.digestion_period_in_hours * interval '1 hour' <= {})",
        (now,),
    )


def dinosaur_predicates(filters: DinosaurFilters, *, now: datetime) -> list[Predicate]:
    predicates: list[Predicate] = []
    if filters.active is not None:
        predicates.append(Predicate("d.is_active = {}", (filters.active,)))
    if filters.herbivore is not None:
        predicates.append(Predicate("d.herbivore = {}", (filters.herbivore,)))
    # hungry=False is intentionally not a "not hungry" filter.
    if filters.hungry is True:
        predicates.append(hungry_predicate(now))
    return predicates


def build_dinosaur_query(filters: DinosaurFilters, *, now: datetime) -> tuple[str, list[Any]]:
    return build_select(
        DINOSAUR_COLUMNS,
        dinosaur_predicates(filters, now=now),
        order_by=NEWEST_FIRST,
    )


async def list_dinosaurs(
    filters: DinosaurFilters | None = None,
    *,
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    sql, args = build_dinosaur_query(filters or DinosaurFilters(), now=now or clock.utcnow())
    return await db.fetch_all(sql, *args)


async def list_all_dinosaurs() -> list[dict[str, Any]]:
    return await list_dinosaurs(DinosaurFilters())


async def list_active_dinosaurs() -> list[dict[str, Any]]:
    return await list_dinosaurs(DinosaurFilters(active=True))


async def list_active_hungry_dinosaurs(*, now: datetime | None = None) -> list[dict[str, Any]]:
    """
    Active dinosaurs that were never fed or whose digestion period has passed.
    """
    return await list_dinosaurs(DinosaurFilters(active=True, hungry=True), now=now)


async def get_dinosaur(dinosaur_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        DINOSAUR_COLUMNS.strip() + "\nWHERE d.id = $1",
        dinosaur_id,
    )


async def count_active_dinosaurs() -> int:
    value = await db.fetch_value(
        """
        SELECT count(*)
        FROM dinosaurs
        WHERE is_active = true
        """
    )
    return int(value or 0)
