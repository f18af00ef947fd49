"""
Postgres access for the read-only query layer, via one asyncpg pool.

The pool is opened and closed by the app lifespan (see `api/main.py`).
Queries use asyncpg's positional placeholders ($1, $2, ...) and rows come
back as plain dicts.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

# Largest value a Postgres bigint key can hold.
BIGINT_MAX = 2**63 - 1

POOL_MIN_SIZE = 1
POOL_MAX_SIZE = 5
COMMAND_TIMEOUT_S = 30

_pool: asyncpg.Pool | None = None


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")

    # asyncpg rejects libpq's sslmode query parameter.
    parts = urlsplit(url)
    if "sslmode" not in parts.query:
        return url
    kept = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    return urlunsplit(parts._replace(query=urlencode(kept)))


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=POOL_MIN_SIZE,
        max_size=POOL_MAX_SIZE,
        command_timeout=COMMAND_TIMEOUT_S,
    )
    logger.info("db_pool_ready min_size=%s max_size=%s", POOL_MIN_SIZE, POOL_MAX_SIZE)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    return [dict(row) for row in await pool().fetch(sql, *args)]


async def fetch_value(sql: str, *args: Any) -> Any:
    """
    First column of the first row, or None when the query returns nothing.
    """
    return await pool().fetchval(sql, *args)
