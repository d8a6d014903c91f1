from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.data.errors import DecodingError
from src.data.fixtures import FIXTURE_TRIPS
from src.data.models import Leg, Location, Passenger, PlannedRoute, Trip, Trips, Waypoint, parse_timestamp


ROUTE_JSON = {
    "total_time": 25.9,
    "total_distance": 15781,
    "starts_at": "2023-11-16T18:15:00Z",
    "ends_at": "2023-11-16T18:40:55Z",
    "legs": [
        {"position": 1, "start_waypoint_id": 1252826, "end_waypoint_id": 1252827},
        {"position": 2, "start_waypoint_id": 1252827, "end_waypoint_id": 1252828},
    ],
}


def _trip_json(**overrides) -> dict:
    data = {
        "estimated_earnings": 2000,
        "slug": "trip1",
        "time_anchor": "2023-11-16T18:15:00Z",
        "in_series": True,
        "passengers": [{"uuid": "p1", "booster_seat": False}],
        "planned_route": ROUTE_JSON,
        "waypoints": [
            {
                "id": 1252826,
                "location": {
                    "address": "101 Main St, Huntington Beach, CA 92648, USA",
                    "lat": 33.6577394,
                    "lng": -118.0018199,
                },
                "passengers": [],
            }
        ],
    }
    data.update(overrides)
    return data


def test_passenger_from_dict() -> None:
    passenger = Passenger.from_dict({"uuid": "8f30452d-b5c2-4047-b8be-4f9e8570c321", "booster_seat": False})

    assert passenger.uuid == "8f30452d-b5c2-4047-b8be-4f9e8570c321"
    assert passenger.booster_seat is False


def test_passenger_missing_uuid_stays_absent() -> None:
    passenger = Passenger.from_dict({"booster_seat": True})

    assert passenger.uuid is None
    assert passenger.to_dict() == {"booster_seat": True}


def test_location_from_dict() -> None:
    location = Location.from_dict(
        {"address": "101 Main St, Huntington Beach, CA 92648, USA", "lat": 33.6577394, "lng": -118.0018199}
    )

    assert location.address == "101 Main St, Huntington Beach, CA 92648, USA"
    assert location.lat == 33.6577394
    assert location.lng == -118.0018199


def test_waypoint_from_dict_with_no_passengers() -> None:
    waypoint = Waypoint.from_dict(_trip_json()["waypoints"][0])

    assert waypoint.id == 1_252_826
    assert waypoint.location.lat == 33.6577394
    assert waypoint.passengers == ()


def test_leg_from_dict() -> None:
    leg = Leg.from_dict({"position": 1, "start_waypoint_id": 1252826, "end_waypoint_id": 1252827})

    assert leg == Leg(position=1, start_waypoint_id=1_252_826, end_waypoint_id=1_252_827)


def test_planned_route_parses_timestamps() -> None:
    route = PlannedRoute.from_dict(ROUTE_JSON)

    assert route.total_time == 25.9
    assert route.total_distance == 15781
    assert route.starts_at == datetime(2023, 11, 16, 18, 15, tzinfo=timezone.utc)
    assert route.ends_at == datetime(2023, 11, 16, 18, 40, 55, tzinfo=timezone.utc)
    assert [leg.position for leg in route.legs] == [1, 2]


def test_trip_from_dict() -> None:
    trip = Trip.from_dict(_trip_json())

    assert trip.estimated_earnings == 2000
    assert trip.slug == "trip1"
    assert trip.time_anchor == "2023-11-16T18:15:00Z"
    assert trip.in_series is True
    assert len(trip.waypoints) == 1


def test_trip_missing_in_series_is_none() -> None:
    data = _trip_json()
    del data["in_series"]

    trip = Trip.from_dict(data)

    assert trip.in_series is None
    assert "in_series" not in trip.to_dict()


def test_unknown_fields_are_ignored() -> None:
    trip = Trip.from_dict(_trip_json(driver_notes="call on arrival"))

    assert trip.slug == "trip1"


def test_total_time_accepts_integer() -> None:
    route = PlannedRoute.from_dict({**ROUTE_JSON, "total_time": 30})

    assert route.total_time == 30.0
    assert isinstance(route.total_time, float)


def test_offset_timestamp_keeps_offset() -> None:
    parsed = parse_timestamp("2023-11-16T23:30:00-05:00")

    assert parsed.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize(
    "overrides",
    [
        {"slug": 12},
        {"estimated_earnings": "2000"},
        {"estimated_earnings": 20.5},
        {"estimated_earnings": True},
        {"in_series": "yes"},
        {"passengers": {"uuid": "p1"}},
        {"passengers": [{"uuid": "p1"}]},
        {"planned_route": {**ROUTE_JSON, "starts_at": "not a date"}},
    ],
)
def test_malformed_trip_raises_decoding_error(overrides) -> None:
    with pytest.raises(DecodingError):
        Trip.from_dict(_trip_json(**overrides))


def test_missing_required_key_raises_decoding_error() -> None:
    data = _trip_json()
    del data["planned_route"]

    with pytest.raises(DecodingError) as exc_info:
        Trip.from_dict(data)

    assert "planned_route" in str(exc_info.value)


def test_trips_document_requires_trips_key() -> None:
    with pytest.raises(DecodingError):
        Trips.from_dict({"rides": []})

    with pytest.raises(DecodingError):
        Trips.from_dict([])


def test_fixture_survives_wire_format() -> None:
    assert Trips.from_dict(FIXTURE_TRIPS.to_dict()) == FIXTURE_TRIPS


def test_models_are_immutable() -> None:
    trip = FIXTURE_TRIPS.trips[0]

    with pytest.raises(AttributeError):
        trip.slug = "other"  # type: ignore[misc]
