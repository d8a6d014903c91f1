"""Fixed trip data for demos and tests."""

from __future__ import annotations

from datetime import datetime, timezone

from src.data.models import Leg, Location, Passenger, PlannedRoute, Trip, Trips, Waypoint


def _utc(year: int, month: int, day: int, hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def _passengers(prefix: str) -> tuple[Passenger, ...]:
    return (
        Passenger(uuid=f"{prefix}-1", booster_seat=False),
        Passenger(uuid=f"{prefix}-2", booster_seat=True),
        Passenger(uuid=f"{prefix}-3", booster_seat=False),
    )


PASSENGERS_1 = _passengers("passenger1")
PASSENGERS_2 = _passengers("passenger2")
PASSENGERS_3 = _passengers("passenger3")

LOCATION_1 = Location("101 Main St, Huntington Beach, CA 92648, USA", 33.6577394, -118.0018199)
LOCATION_2 = Location("981 CA-1, Seal Beach, CA 90740, USA", 33.744308, -118.101178)
LOCATION_3 = Location("6255 2nd St, Long Beach, CA 90803, USA", 33.7585003, -118.1128225)
LOCATION_4 = Location("102 Main St, Huntington Beach, CA 92648, USA", 33.6577395, -118.0018200)
LOCATION_5 = Location("982 CA-1, Seal Beach, CA 90740, USA", 33.744309, -118.101179)

WAYPOINT_1 = Waypoint(1_252_826, LOCATION_1, PASSENGERS_1)
WAYPOINT_2 = Waypoint(1_252_827, LOCATION_2, PASSENGERS_1)
WAYPOINT_3 = Waypoint(1_252_828, LOCATION_3, PASSENGERS_1)
WAYPOINT_4 = Waypoint(1_252_829, LOCATION_4, PASSENGERS_2)
WAYPOINT_5 = Waypoint(1_252_830, LOCATION_5, PASSENGERS_3)

ROUTE_1 = PlannedRoute(
    total_time=25.9,
    total_distance=15781,
    starts_at=_utc(2023, 11, 16, 18, 15),
    ends_at=_utc(2023, 11, 16, 18, 40, 55),
    legs=(
        Leg(1, 1_252_826, 1_252_827),
        Leg(2, 1_252_827, 1_252_828),
        Leg(3, 1_252_828, 1_252_829),
        Leg(4, 1_252_829, 1_252_830),
    ),
)

ROUTE_2 = PlannedRoute(
    total_time=30.0,
    total_distance=20000,
    starts_at=_utc(2023, 11, 17, 8, 0),
    ends_at=_utc(2023, 11, 17, 8, 30),
    legs=(
        Leg(1, 1_252_829, 1_252_830),
        Leg(2, 1_252_830, 1_252_828),
        Leg(3, 1_252_828, 1_252_827),
    ),
)

ROUTE_3 = PlannedRoute(
    total_time=15.5,
    total_distance=12000,
    starts_at=_utc(2023, 11, 18, 14, 0),
    ends_at=_utc(2023, 11, 18, 14, 15, 30),
    legs=(
        Leg(1, 1_252_830, 1_252_829),
        Leg(2, 1_252_829, 1_252_827),
        Leg(3, 1_252_827, 1_252_826),
    ),
)

FIXTURE_TRIPS = Trips(
    trips=(
        Trip(
            estimated_earnings=2000,
            slug="trip1",
            time_anchor="2023-11-16T18:15:00Z",
            in_series=True,
            passengers=PASSENGERS_1,
            planned_route=ROUTE_1,
            waypoints=(WAYPOINT_1, WAYPOINT_2, WAYPOINT_3, WAYPOINT_4, WAYPOINT_5),
        ),
        Trip(
            estimated_earnings=2500,
            slug="trip2",
            time_anchor="2023-11-17T08:00:00Z",
            in_series=True,
            passengers=PASSENGERS_2,
            planned_route=ROUTE_2,
            waypoints=(WAYPOINT_4, WAYPOINT_5, WAYPOINT_3),
        ),
        Trip(
            estimated_earnings=1800,
            slug="trip3",
            time_anchor="2023-11-18T14:00:00Z",
            in_series=True,
            passengers=PASSENGERS_3,
            planned_route=ROUTE_3,
            waypoints=(WAYPOINT_5, WAYPOINT_4, WAYPOINT_2, WAYPOINT_1),
        ),
    )
)


__all__ = ["FIXTURE_TRIPS"]
