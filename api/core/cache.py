"""
Redis client wiring using redis-py's asyncio API.

Like the DB pool, the client is created once per process on startup and
closed on shutdown (see `api/main.py`). Feature code receives the client as a
handle and never closes it.
"""

from __future__ import annotations

import logging
import os

import redis.asyncio as redis

logger = logging.getLogger(__name__)

DEFAULT_REDIS_URL = "redis://localhost:6379"

_client: redis.Redis | None = None


def redis_url() -> str:
    return os.environ.get("REDIS_URL", DEFAULT_REDIS_URL).strip() or DEFAULT_REDIS_URL


async def init_client() -> None:
    global _client
    if _client is not None:
        return None
    _client = redis.from_url(
        redis_url(),
        encoding="utf-8",
        decode_responses=True,
    )
    logger.info("redis_client_ready url=%s", redis_url())


async def close_client() -> None:
    global _client
    if _client is None:
        return None
    await _client.aclose()
    _client = None


def client() -> redis.Redis:
    if _client is None:
        raise RuntimeError("Redis client is not initialized. Call init_client() on startup.")
    return _client
