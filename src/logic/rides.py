"""Load trips, keep the grouped result and answer section/row queries."""

from __future__ import annotations

from datetime import tzinfo
from enum import Enum
import logging
import threading
from typing import Callable

from src.data.models import Trip
from src.data.trip_client import TripClient
from src.logic.grouping import TripGroup, group_trips
from src.rendering.formatters import (
    DEFAULT_TIMEZONE,
    error_message,
    format_addresses,
    format_currency,
    format_date_key,
    format_riders,
    format_time_range,
)

logger = logging.getLogger(__name__)


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class RidesViewModel:
    """
    Drives a trip list screen.

    Only the most recently started load may change state: every load takes a
    generation number and its outcome is dropped if a newer load started or
    cancel() was called in the meantime. Callbacks run while the result is
    being applied, so a newer load cannot interleave with them.
    """

    def __init__(self, client: TripClient, tz: tzinfo = DEFAULT_TIMEZONE) -> None:
        self._client = client
        self._tz = tz
        self._lock = threading.RLock()
        self._generation = 0
        self._settled_state = LoadState.IDLE
        self._state = LoadState.IDLE
        self._trip_groups: list[TripGroup] = []
        self._error_message: str | None = None

        self.on_loaded: Callable[[list[TripGroup]], None] | None = None
        self.on_error: Callable[[str], None] | None = None
        self.on_card_tapped: Callable[[Trip], None] | None = None

    @property
    def state(self) -> LoadState:
        with self._lock:
            return self._state

    @property
    def trip_groups(self) -> list[TripGroup]:
        with self._lock:
            return list(self._trip_groups)

    @property
    def error_message(self) -> str | None:
        with self._lock:
            return self._error_message

    def load_trips(self) -> None:
        """Fetch and group trips on the calling thread."""
        self._run(self._begin())

    def start_load(self) -> threading.Thread:
        """Run a load on a background thread, superseding any load in flight."""
        # Taken on the caller's thread: call order decides which load is newest.
        generation = self._begin()
        thread = threading.Thread(target=self._run, args=(generation,), daemon=True)
        thread.start()
        return thread

    def _run(self, generation: int) -> None:
        try:
            trips = self._client.fetch_trips()
        except Exception as exc:
            logger.warning("Trip load %d failed: %s", generation, exc)
            self._finish_failed(generation, error_message(exc))
            return
        self._finish_loaded(generation, group_trips(trips))

    def refresh(self) -> threading.Thread:
        """Reload, e.g. for pull-to-refresh or a retry after an error."""
        return self.start_load()

    def cancel(self) -> None:
        """Drop the outcome of any load in flight."""
        with self._lock:
            self._generation += 1
            if self._state is LoadState.LOADING:
                self._state = self._settled_state
        logger.debug("Cancelled pending trip loads")

    def _begin(self) -> int:
        with self._lock:
            self._generation += 1
            self._state = LoadState.LOADING
            generation = self._generation
        logger.debug("Trip load %d started", generation)
        return generation

    def _finish_loaded(self, generation: int, groups: list[TripGroup]) -> None:
        with self._lock:
            if generation != self._generation:
                logger.info("Discarding result of superseded trip load %d", generation)
                return
            self._trip_groups = groups
            self._error_message = None
            self._state = self._settled_state = LoadState.LOADED
            logger.debug("Trip load %d produced %d groups", generation, len(groups))
            if self.on_loaded is not None:
                self.on_loaded(groups)

    def _finish_failed(self, generation: int, message: str) -> None:
        with self._lock:
            if generation != self._generation:
                logger.info("Discarding error of superseded trip load %d", generation)
                return
            self._error_message = message
            self._state = self._settled_state = LoadState.FAILED
            if self.on_error is not None:
                self.on_error(message)

    def number_of_sections(self) -> int:
        with self._lock:
            return len(self._trip_groups)

    def number_of_rows(self, section: int) -> int:
        return len(self.trip_group(section).trips)

    def trip_group(self, section: int) -> TripGroup:
        with self._lock:
            if not 0 <= section < len(self._trip_groups):
                raise IndexError(f"Section {section} out of range")
            return self._trip_groups[section]

    def trip(self, section: int, row: int) -> Trip:
        trips = self.trip_group(section).trips
        if not 0 <= row < len(trips):
            raise IndexError(f"Row {row} out of range for section {section}")
        return trips[row]

    def trip_date(self, section: int) -> str:
        return format_date_key(self.trip_group(section).date_key)

    def trip_group_time(self, section: int) -> str:
        return self.trip_group(section).formatted_time(self._tz)

    def total_estimated_earnings(self, section: int) -> str:
        return format_currency(self.trip_group(section).total_estimated_earnings)

    def trip_time(self, section: int, row: int) -> str:
        route = self.trip(section, row).planned_route
        return format_time_range(route.starts_at, route.ends_at, self._tz)

    def trip_riders(self, section: int, row: int) -> str:
        return format_riders(self.trip(section, row))

    def estimated_earnings(self, section: int, row: int) -> str:
        return format_currency(self.trip(section, row).estimated_earnings)

    def trip_addresses(self, section: int, row: int) -> list[str]:
        return format_addresses(self.trip(section, row))

    def card_tapped(self, section: int, row: int) -> None:
        trip = self.trip(section, row)
        if self.on_card_tapped is not None:
            self.on_card_tapped(trip)


__all__ = ["LoadState", "RidesViewModel"]
