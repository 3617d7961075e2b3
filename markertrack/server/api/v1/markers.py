"""
Marker Catalogue Endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from markertrack.core.models.io import MarkerCreate, MarkerRead
from markertrack.server.services.deps import MarkerServiceDep, TokenDep

router = APIRouter(tags=["marker"])


@router.get(
    "",
    response_model=List[MarkerRead],
    summary="List Markers",
    description="Every marker in the catalogue, ordered by key.",
)
async def list_markers(service: MarkerServiceDep) -> List[MarkerRead]:
    return await service.list_markers()


@router.post(
    "",
    response_model=MarkerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Marker",
    description="Add a marker to the catalogue. Requires a bearer token.",
    responses={
        201: {"description": "Marker created"},
        401: {"description": "Missing or invalid bearer token"},
        409: {"description": "A marker with this key already exists"},
    },
)
async def create_marker(payload: MarkerCreate, service: MarkerServiceDep, token: TokenDep) -> MarkerRead:
    return await service.create_marker(payload)
