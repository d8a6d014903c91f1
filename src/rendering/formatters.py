"""Display strings for trips, trip groups and feed errors."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from src.data.errors import DecodingError, InvalidResponseError, NetworkError
from src.data.models import Trip

DEFAULT_TIMEZONE = ZoneInfo("America/New_York")

WEEKDAY_ABBREVIATIONS = {
    0: "Mon",
    1: "Tue",
    2: "Wed",
    3: "Thu",
    4: "Fri",
    5: "Sat",
    6: "Sun",
}

NETWORK_ERROR_MESSAGE = "Network error: Please check your internet connection."
INVALID_RESPONSE_MESSAGE = "Server error: Received an invalid response."
DECODING_ERROR_MESSAGE = "Data error: Unable to process the received data."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error: Please try again later."


def format_currency(cents: int) -> str:
    """2000 -> "$20.00"."""
    return f"${cents / 100:.2f}"


def format_clock(dt: datetime, tz: tzinfo = DEFAULT_TIMEZONE) -> str:
    """Clock time with a one-letter meridiem, e.g. "1:15p"."""
    local = dt.astimezone(tz)
    clock = local.strftime("%I:%M")
    clock = clock.lstrip("0") if clock.startswith("0") else clock
    return f"{clock}{'a' if local.hour < 12 else 'p'}"


def format_time_range(starts_at: datetime, ends_at: datetime, tz: tzinfo = DEFAULT_TIMEZONE) -> str:
    return f"{format_clock(starts_at, tz)} - {format_clock(ends_at, tz)}"


def format_date_label(dt: datetime, tz: tzinfo = DEFAULT_TIMEZONE) -> str:
    """Abbreviated weekday and month/day, e.g. "Thu 11/16"."""
    local = dt.astimezone(tz)
    return f"{WEEKDAY_ABBREVIATIONS[local.weekday()]} {local:%m/%d}"


def format_date_key(key: str) -> str:
    """Label for a "yyyy-MM-dd" group key, e.g. "2023-11-16" -> "Thu 11/16"."""
    day = date.fromisoformat(key)
    return f"{WEEKDAY_ABBREVIATIONS[day.weekday()]} {day:%m/%d}"


def format_riders(trip: Trip) -> str:
    riders = len(trip.passengers)
    boosters = sum(1 for p in trip.passengers if p.booster_seat)

    riders_text = "1 rider" if riders == 1 else f"{riders} riders"
    boosters_text = "1 booster" if boosters == 1 else f"{boosters} boosters"

    if boosters == 0:
        return f"({riders_text})"
    return f"({riders_text} - {boosters_text})"


def shorten_address(address: str) -> str:
    """
    Collapse "street, city, STATE ZIP, country" to "street, city ZIP".

    Only the segment count is checked: with three or more comma-separated
    segments the last one is dropped and the city is merged with the last
    token of the one before it. Shorter addresses are returned re-joined.
    """
    parts = [part.strip() for part in address.split(",") if part]
    if len(parts) >= 3:
        tokens = parts[-2].split()
        zip_code = tokens[-1] if tokens else ""
        parts[-2] = f"{parts[-3]} {zip_code}"
        parts.pop()
        del parts[-2]
    return ", ".join(parts)


def format_addresses(trip: Trip) -> list[str]:
    return [
        f"{index}. {shorten_address(waypoint.location.address)}"
        for index, waypoint in enumerate(trip.waypoints, start=1)
    ]


def error_message(error: BaseException) -> str:
    """User-facing message for a failed trip load."""
    if isinstance(error, NetworkError):
        return NETWORK_ERROR_MESSAGE
    if isinstance(error, InvalidResponseError):
        return INVALID_RESPONSE_MESSAGE
    if isinstance(error, DecodingError):
        return DECODING_ERROR_MESSAGE
    return UNEXPECTED_ERROR_MESSAGE


__all__ = [
    "DEFAULT_TIMEZONE",
    "format_currency",
    "format_clock",
    "format_time_range",
    "format_date_label",
    "format_date_key",
    "format_riders",
    "shorten_address",
    "format_addresses",
    "error_message",
]
