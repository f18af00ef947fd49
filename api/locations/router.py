"""
Location API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from core.db import BIGINT_MAX

from . import dependencies, repository, service
from .occupancy import CarnivoreLocationCounter

router = APIRouter()


@router.get(
    "/locations",
    summary="List locations status",
    description="Every grid location (A0..Z15) with its count of hungry carnivores.",
)
async def list_locations_status(
    counter: CarnivoreLocationCounter = Depends(dependencies.get_carnivore_counter),
) -> list[dict]:
    return await service.grid_status(counter)


@router.get(
    "/locations/needing-maintenance",
    summary="Locations needing maintenance",
    description="Locations not maintained within the given hours (default 720 = 30 days), never-maintained first.",
)
async def list_locations_needing_maintenance(
    hours: int = Query(
        repository.DEFAULT_MAINTENANCE_HOURS,
        ge=0,
        le=repository.MAX_MAINTENANCE_HOURS,
        description="Hours since last maintenance.",
    ),
) -> list[dict]:
    return await service.locations_needing_maintenance(hours)


@router.get("/locations/records", summary="List stored locations")
async def list_location_records(
    park_id: int | None = Query(default=None, ge=0, le=BIGINT_MAX, description="Restrict to one park."),
) -> list[dict]:
    return await service.list_locations(park_id)


@router.get(
    "/locations/{park_id}/{name}",
    summary="Get location by park and name",
    responses={404: {"description": "Location not found."}},
)
async def get_location(
    name: str,
    park_id: int = Path(ge=0, le=BIGINT_MAX),
) -> dict:
    location = await service.find_location(name, park_id)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found.")
    return location
