"""
Marker catalogue service.
"""

from __future__ import annotations

from typing import List

from markertrack.core.database.entities.markers import Marker
from markertrack.core.database.utils import RepoBundle
from markertrack.core.errors import DuplicateMarkerError
from markertrack.core.logging_config import get_logger
from markertrack.core.models.io import MarkerCreate, MarkerRead

logger = get_logger(__name__)


def to_marker_read(marker: Marker) -> MarkerRead:
    return MarkerRead(marker_id=marker.key, letter=marker.value)


class MarkerService:
    """Business logic behind the ``/api/marker`` routes."""

    def __init__(self, repos: RepoBundle) -> None:
        self.repos = repos

    async def list_markers(self) -> List[MarkerRead]:
        markers = await self.repos.markers.list()
        return [to_marker_read(marker) for marker in markers]

    async def create_marker(self, payload: MarkerCreate) -> MarkerRead:
        """Add a marker to the catalogue.

        Raises:
            DuplicateMarkerError: the key is already taken
        """
        if await self.repos.markers.get_by_key(payload.marker_id) is not None:
            raise DuplicateMarkerError(payload.marker_id)
        marker = await self.repos.markers.create(Marker(key=payload.marker_id, value=payload.letter))
        logger.info(f"Created marker '{marker.key}'")
        return to_marker_read(marker)
