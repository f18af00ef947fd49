"""
Unit tests for predicate composition.
"""

import pytest

from core.query import Predicate, build_select


class TestBuildSelect:
    def test_no_predicates_has_no_where(self):
        sql, args = build_select("SELECT * FROM t", [], order_by="t.a DESC")

        assert sql == "SELECT * FROM t\nORDER BY t.a DESC"
        assert args == []

    def test_placeholders_are_numbered_across_predicates(self):
        sql, args = build_select(
            "SELECT * FROM t",
            [
                Predicate("t.a = {}", (1,)),
                Predicate("(t.b IS NULL OR t.b < {})", ("x",)),
                Predicate("t.c BETWEEN {} AND {}", (2, 3)),
            ],
        )

        assert "WHERE t.a = $1" in sql
        assert "AND (t.b IS NULL OR t.b < $2)" in sql
        assert "AND t.c BETWEEN $3 AND $4" in sql
        assert "ORDER BY" not in sql
        assert args == [1, "x", 2, 3]

    def test_predicate_without_args(self):
        sql, args = build_select("SELECT * FROM t", [Predicate("t.active")])

        assert sql.endswith("WHERE t.active")
        assert args == []

    def test_mismatched_placeholders_raise(self):
        with pytest.raises(ValueError):
            build_select("SELECT * FROM t", [Predicate("t.a = {}", (1, 2))])
