"""
Location route dependencies.
"""

from __future__ import annotations

from core import cache

from .occupancy import CarnivoreLocationCounter


async def get_carnivore_counter() -> CarnivoreLocationCounter:
    return CarnivoreLocationCounter(cache.client())
