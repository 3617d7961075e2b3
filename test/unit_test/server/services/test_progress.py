"""Unit tests for progress calculation and leaderboard ranking."""

from datetime import datetime, timedelta

import pytest

from markertrack.core.database.entities import Marker, User, UserMarker
from markertrack.server.services.progress import (
    build_leaderboard,
    build_marker_response,
    calculate_progress,
    rank,
)

REGISTERED = datetime(2026, 1, 1, 12, 0, 0)


def _user(user_id: int, events: list, first_name: str = "Ada", last_name: str = "Lovelace") -> User:
    user = User(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=f"user{user_id}@example.com",
        registration_date=REGISTERED,
    )
    user.user_markers = [
        UserMarker(id=index, marker=Marker(key=key, value=value), date_time=date_time)
        for index, (key, value, date_time) in enumerate(events, start=1)
    ]
    return user


class TestCalculateProgress:
    def test_no_markers_is_zero(self):
        assert calculate_progress(REGISTERED, []) == timedelta(0)

    def test_uses_latest_marker(self):
        dates = [REGISTERED + timedelta(minutes=5), REGISTERED + timedelta(minutes=1)]
        assert calculate_progress(REGISTERED, dates) == timedelta(minutes=5)

    def test_insertion_order_does_not_matter(self):
        dates = [REGISTERED + timedelta(seconds=s) for s in (30, 90, 10)]
        assert calculate_progress(REGISTERED, dates) == calculate_progress(REGISTERED, sorted(dates))

    def test_marker_before_registration_is_negative(self):
        assert calculate_progress(REGISTERED, [REGISTERED - timedelta(hours=1)]) == timedelta(hours=-1)

    def test_accepts_generator(self):
        assert calculate_progress(REGISTERED, (d for d in [REGISTERED + timedelta(seconds=3)])) == timedelta(seconds=3)


class TestBuildMarkerResponse:
    def test_shapes_user(self):
        user = _user(7, [("m1", "A", REGISTERED + timedelta(seconds=45))], first_name="Grace", last_name="Hopper")

        response = build_marker_response(user)

        assert response.user_id == 7
        assert response.user_name == "Grace Hopper"
        assert response.progress == timedelta(seconds=45)
        assert [(m.marker_id, m.letter) for m in response.markers] == [("m1", "A")]

    def test_serializes_camel_case_with_progress_in_seconds(self):
        user = _user(1, [("m1", "A", REGISTERED + timedelta(minutes=2))])

        data = build_marker_response(user).model_dump(by_alias=True, mode="json")

        assert data["userId"] == 1
        assert data["userName"] == "Ada Lovelace"
        assert data["progress"] == 120.0
        assert data["markers"][0]["markerId"] == "m1"


class TestRank:
    def test_more_markers_first_then_faster(self):
        slow = _user(1, [("m1", "A", REGISTERED + timedelta(hours=2)), ("m2", "B", REGISTERED + timedelta(hours=3))])
        fast = _user(2, [("m1", "A", REGISTERED + timedelta(hours=1)), ("m2", "B", REGISTERED + timedelta(hours=2))])
        single = _user(3, [("m1", "A", REGISTERED + timedelta(minutes=1))])
        none = _user(4, [])

        ranked = build_leaderboard([none, single, slow, fast])

        assert [r.user_id for r in ranked] == [2, 1, 3, 4]

    def test_ties_keep_incoming_order(self):
        first = build_marker_response(_user(1, []))
        second = build_marker_response(_user(2, []))

        assert [r.user_id for r in rank([first, second])] == [1, 2]
        assert [r.user_id for r in rank([second, first])] == [2, 1]

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_rank_preserves_size(self, count):
        responses = [build_marker_response(_user(i, [])) for i in range(count)]
        assert len(rank(responses)) == count
