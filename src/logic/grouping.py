"""Group trips by calendar date and aggregate per-day totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Iterable

from src.data.models import Trip
from src.rendering.formatters import DEFAULT_TIMEZONE, format_time_range

DATE_KEY_FORMAT = "%Y-%m-%d"


def date_key(trip: Trip) -> str:
    """Calendar date of the trip's start, in the offset the timestamp carries."""
    return trip.planned_route.starts_at.strftime(DATE_KEY_FORMAT)


@dataclass(frozen=True)
class TripGroup:
    """Trips sharing a start date, kept in feed order."""

    date_key: str
    trips: tuple[Trip, ...]
    total_estimated_earnings: int = field(init=False)
    starts_at: datetime = field(init=False)
    ends_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        if not self.trips:
            raise ValueError(f"TripGroup {self.date_key} must contain at least one trip")
        # Span comes from first/last in feed order, not min/max.
        object.__setattr__(self, "total_estimated_earnings", sum(t.estimated_earnings for t in self.trips))
        object.__setattr__(self, "starts_at", self.trips[0].planned_route.starts_at)
        object.__setattr__(self, "ends_at", self.trips[-1].planned_route.ends_at)

    def formatted_time(self, tz: tzinfo = DEFAULT_TIMEZONE) -> str:
        """Section header time range, e.g. "1:15p - 2:30p"."""
        return format_time_range(self.starts_at, self.ends_at, tz)


def group_trips(trips: Iterable[Trip]) -> list[TripGroup]:
    """Partition trips by date key; groups ascend by key, trips keep input order."""
    buckets: dict[str, list[Trip]] = {}
    for trip in trips:
        buckets.setdefault(date_key(trip), []).append(trip)
    return [TripGroup(key, tuple(buckets[key])) for key in sorted(buckets)]


__all__ = ["DATE_KEY_FORMAT", "TripGroup", "date_key", "group_trips"]
