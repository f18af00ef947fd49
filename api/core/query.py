"""
Small helpers for composing parameterized SELECTs from a list of predicates.

A `Predicate` is a SQL fragment with `{}` slots plus the values for those
slots. `build_select` numbers the slots into asyncpg placeholders ($1, $2,
...) in order, joins the predicates with AND and appends the ORDER BY.

    sql, args = build_select(
        "SELECT * FROM dinosaurs d",
        [Predicate("d.is_active = {}", (True,))],
        order_by="d.added_at DESC",
    )
    # "SELECT * FROM dinosaurs d WHERE d.is_active = $1 ORDER BY d.added_at DESC", [True]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass(frozen=True)
class Predicate:
    sql: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    def render(self, first_index: int) -> str:
        slots = [f"${first_index + i}" for i in range(len(self.args))]
        if self.sql.count("{}") != len(slots):
            raise ValueError(f"Predicate placeholders do not match args: {self.sql!r}")
        return self.sql.format(*slots)


def build_select(
    select_sql: str,
    predicates: Sequence[Predicate],
    *,
    order_by: str | None = None,
) -> tuple[str, list[Any]]:
    args: list[Any] = []
    clauses: list[str] = []
    for predicate in predicates:
        clauses.append(predicate.render(len(args) + 1))
        args.extend(predicate.args)

    sql = select_sql.strip()
    if clauses:
        sql += "\nWHERE " + "\n  AND ".join(clauses)
    if order_by:
        sql += "\nORDER BY " + order_by
    return sql, args
