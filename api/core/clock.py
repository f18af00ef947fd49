"""
Wall-clock access.

Queries that depend on "now" read it here and bind it as a parameter, so
tests can pass a fixed instant instead.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
