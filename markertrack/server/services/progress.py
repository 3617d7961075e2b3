"""
Progress calculation and response shaping.

A user's progress is the time between registration and their most recent
marker event. The leaderboard ranks users by how many markers they have
reached (more first) and then by how quickly they got there (less time first).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, List

from markertrack.core.database.entities.users import User
from markertrack.core.models.io import MarkerModel, MarkerResponse


def calculate_progress(registration_date: datetime, marker_dates: Iterable[datetime]) -> timedelta:
    """Return the latest marker date minus the registration date.

    Args:
        registration_date: When the user registered
        marker_dates: Timestamps of the user's marker events, in any order

    Returns:
        ``timedelta(0)`` when there are no marker events. Otherwise the
        difference, which is negative if every event precedes registration.
    """
    latest = max(marker_dates, default=None)
    if latest is None:
        return timedelta(0)
    return latest - registration_date


def build_marker_response(user: User) -> MarkerResponse:
    """Shape a user with loaded marker events into a ``MarkerResponse``.

    ``user.user_markers`` and each event's ``marker`` must already be loaded.
    """
    events = list(user.user_markers)
    return MarkerResponse(
        user_id=user.id,
        user_name=user.full_name,
        progress=calculate_progress(user.registration_date, (event.date_time for event in events)),
        markers=[
            MarkerModel(marker_id=event.marker.key, letter=event.marker.value, timestamp=event.date_time)
            for event in events
        ],
    )


def rank(responses: Iterable[MarkerResponse]) -> List[MarkerResponse]:
    """Order by marker count descending, then progress ascending.

    The sort is stable, so ties keep their incoming order.
    """
    return sorted(responses, key=lambda response: (-len(response.markers), response.progress))


def build_leaderboard(users: Iterable[User]) -> List[MarkerResponse]:
    """Shape and rank every user."""
    return rank(build_marker_response(user) for user in users)
