"""Trip feed data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from src.data.errors import DecodingError


def _require(mapping: Any, key: str, context: str) -> Any:
    if not isinstance(mapping, dict):
        raise DecodingError(f"Expected an object for {context}, got {type(mapping).__name__}")
    if key not in mapping:
        raise DecodingError(f"Missing required key '{key}' in {context}")
    return mapping[key]


def _int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"'{key}' must be an integer")
    return value


def _float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodingError(f"'{key}' must be a number")
    return float(value)


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise DecodingError(f"'{key}' must be a string")
    return value


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise DecodingError(f"'{key}' must be a boolean")
    return value


def _list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise DecodingError(f"'{key}' must be a list")
    return value


def parse_timestamp(value: Any, key: str = "timestamp") -> datetime:
    """Parse an ISO-8601 timestamp; naive values are treated as UTC."""
    text = _str(value, key)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise DecodingError(f"'{key}' is not an ISO-8601 timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        return text[:-6] + "Z"
    return text


@dataclass(frozen=True)
class Location:
    """Street address and coordinates of a waypoint."""

    address: str
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Location:
        return cls(
            address=_str(_require(data, "address", "location"), "address"),
            lat=_float(_require(data, "lat", "location"), "lat"),
            lng=_float(_require(data, "lng", "location"), "lng"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Passenger:
    """A rider; uuid is None for anonymized or unassigned passengers."""

    uuid: str | None
    booster_seat: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Passenger:
        uuid = data.get("uuid") if isinstance(data, dict) else None
        return cls(
            uuid=_str(uuid, "uuid") if uuid is not None else None,
            booster_seat=_bool(_require(data, "booster_seat", "passenger"), "booster_seat"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"booster_seat": self.booster_seat}
        if self.uuid is not None:
            result["uuid"] = self.uuid
        return result


@dataclass(frozen=True)
class Waypoint:
    """A stop on a trip with the passengers boarding or alighting there."""

    id: int
    location: Location
    passengers: tuple[Passenger, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Waypoint:
        passengers = _list(_require(data, "passengers", "waypoint"), "passengers")
        return cls(
            id=_int(_require(data, "id", "waypoint"), "id"),
            location=Location.from_dict(_require(data, "location", "waypoint")),
            passengers=tuple(Passenger.from_dict(item) for item in passengers),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "location": self.location.to_dict(),
            "passengers": [p.to_dict() for p in self.passengers],
        }


@dataclass(frozen=True)
class Leg:
    """One directed segment of a planned route, by waypoint id."""

    position: int
    start_waypoint_id: int
    end_waypoint_id: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Leg:
        return cls(
            position=_int(_require(data, "position", "leg"), "position"),
            start_waypoint_id=_int(_require(data, "start_waypoint_id", "leg"), "start_waypoint_id"),
            end_waypoint_id=_int(_require(data, "end_waypoint_id", "leg"), "end_waypoint_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "start_waypoint_id": self.start_waypoint_id,
            "end_waypoint_id": self.end_waypoint_id,
        }


@dataclass(frozen=True)
class PlannedRoute:
    """Route plan for a trip. total_time is minutes, total_distance is meters."""

    total_time: float
    total_distance: int
    starts_at: datetime
    ends_at: datetime
    legs: tuple[Leg, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlannedRoute:
        legs = _list(_require(data, "legs", "planned_route"), "legs")
        return cls(
            total_time=_float(_require(data, "total_time", "planned_route"), "total_time"),
            total_distance=_int(_require(data, "total_distance", "planned_route"), "total_distance"),
            starts_at=parse_timestamp(_require(data, "starts_at", "planned_route"), "starts_at"),
            ends_at=parse_timestamp(_require(data, "ends_at", "planned_route"), "ends_at"),
            legs=tuple(Leg.from_dict(item) for item in legs),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_time": self.total_time,
            "total_distance": self.total_distance,
            "starts_at": format_timestamp(self.starts_at),
            "ends_at": format_timestamp(self.ends_at),
            "legs": [leg.to_dict() for leg in self.legs],
        }


@dataclass(frozen=True)
class Trip:
    """A scheduled ride. estimated_earnings is in cents."""

    estimated_earnings: int
    slug: str
    time_anchor: str
    in_series: bool | None
    passengers: tuple[Passenger, ...]
    planned_route: PlannedRoute
    waypoints: tuple[Waypoint, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Trip:
        in_series = data.get("in_series") if isinstance(data, dict) else None
        passengers = _list(_require(data, "passengers", "trip"), "passengers")
        waypoints = _list(_require(data, "waypoints", "trip"), "waypoints")
        return cls(
            estimated_earnings=_int(_require(data, "estimated_earnings", "trip"), "estimated_earnings"),
            slug=_str(_require(data, "slug", "trip"), "slug"),
            time_anchor=_str(_require(data, "time_anchor", "trip"), "time_anchor"),
            in_series=_bool(in_series, "in_series") if in_series is not None else None,
            passengers=tuple(Passenger.from_dict(item) for item in passengers),
            planned_route=PlannedRoute.from_dict(_require(data, "planned_route", "trip")),
            waypoints=tuple(Waypoint.from_dict(item) for item in waypoints),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "estimated_earnings": self.estimated_earnings,
            "slug": self.slug,
            "time_anchor": self.time_anchor,
            "passengers": [p.to_dict() for p in self.passengers],
            "planned_route": self.planned_route.to_dict(),
            "waypoints": [w.to_dict() for w in self.waypoints],
        }
        if self.in_series is not None:
            result["in_series"] = self.in_series
        return result


@dataclass(frozen=True)
class Trips:
    """Top-level feed document: {"trips": [...]}."""

    trips: tuple[Trip, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Trips:
        items = _list(_require(data, "trips", "feed"), "trips")
        return cls(trips=tuple(Trip.from_dict(item) for item in items))

    def to_dict(self) -> dict[str, Any]:
        return {"trips": [trip.to_dict() for trip in self.trips]}


__all__ = [
    "Location",
    "Passenger",
    "Waypoint",
    "Leg",
    "PlannedRoute",
    "Trip",
    "Trips",
    "parse_timestamp",
    "format_timestamp",
]
