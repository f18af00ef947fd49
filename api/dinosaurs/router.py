"""
Dinosaur API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, Query

from core.db import BIGINT_MAX

from . import service

router = APIRouter()


@router.get(
    "/dinosaurs",
    summary="List dinosaurs",
    description="Dinosaurs newest first, with optional active/hungry/herbivore filters ('true' or 'false').",
)
async def list_dinosaurs(
    active: str | None = Query(default=None, description="Filter on is_active."),
    hungry: str | None = Query(default=None, description="'true' keeps only hungry dinosaurs; 'false' is ignored."),
    herbivore: str | None = Query(default=None, description="Filter on herbivore."),
) -> list[dict]:
    filters = service.filters_from_query(active=active, hungry=hungry, herbivore=herbivore)
    return await service.list_dinosaurs(filters)


@router.get("/dinosaurs/count", summary="Count active dinosaurs")
async def count_active_dinosaurs() -> dict:
    return await service.active_dinosaur_count()


@router.get(
    "/dinosaurs/{dinosaur_id}",
    summary="Get dinosaur by ID",
    responses={404: {"description": "Dinosaur not found."}},
)
async def get_dinosaur(dinosaur_id: int = Path(ge=1, le=BIGINT_MAX)) -> dict:
    dinosaur = await service.get_dinosaur(dinosaur_id)
    if dinosaur is None:
        raise HTTPException(status_code=404, detail="Dinosaur not found.")
    return dinosaur
