"""
Hungry-carnivore counts per grid location, read from Redis.

Each location has a hash at `carnivore:<location>`; its size (HLEN) is the
number of hungry carnivores currently there. All sizes are read in one
pipelined round trip.
"""

from __future__ import annotations

import logging
import string
from typing import Any

import redis.asyncio as redis

logger = logging.getLogger(__name__)

CARNIVORE_KEY_PREFIX = "carnivore:"

GRID_COLUMNS = string.ascii_uppercase
GRID_ROWS = 16


def get_grid_location_names() -> list[str]:
    """
    All grid location names, column-major: A0..A15, B0..B15, ..., Z15 (416).
    """
    return [f"{column}{row}" for column in GRID_COLUMNS for row in range(GRID_ROWS)]


def carnivore_key(location: str) -> str:
    return f"{CARNIVORE_KEY_PREFIX}{location}"


def _as_count(value: Any) -> int:
    # bool is an int subclass but never a valid HLEN reply.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


class CarnivoreLocationCounter:
    """
    Reads per-location carnivore counts through a Redis client it does not own.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        self.redis = redis_client

    async def get_counts(self, location_names: list[str]) -> list[dict[str, Any]]:
        """
        One `{"location", "hungryCarnivoreCount"}` per input name, in input
        order. Failed or malformed replies count as 0. An absent pipeline
        result gives an empty list.
        """
        if not location_names:
            return []

        pipe = self.redis.pipeline(transaction=False)
        for name in location_names:
            pipe.hlen(carnivore_key(name))
        results = await pipe.execute(raise_on_error=False)

        if not results:
            return []

        counts: list[dict[str, Any]] = []
        for name, value in zip(location_names, results):
            if isinstance(value, Exception):
                logger.warning("carnivore_count_failed location=%s error=%s", name, value)
                count = 0
            else:
                count = _as_count(value)
            counts.append({"location": name, "hungryCarnivoreCount": count})
        return counts
