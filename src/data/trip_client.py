"""Trip feed clients: live HTTP, fixed fixture and always-failing."""

from __future__ import annotations

import logging
import time
from typing import Protocol

import requests

from src.data.errors import DecodingError, InvalidResponseError, NetworkError, TripClientError
from src.data.fixtures import FIXTURE_TRIPS
from src.data.models import Trip, Trips

TRIPS_URL = "https://hopskipdrive-static-files.s3.us-east-2.amazonaws.com/interview-resources/Trip.json"
ERROR_BODY_LIMIT = 200

logger = logging.getLogger(__name__)


class TripClient(Protocol):
    """Anything that can produce the current list of trips."""

    def fetch_trips(self) -> list[Trip]:
        ...


class LiveTripClient:
    """Fetches the trip feed over HTTP using requests."""

    def __init__(self, url: str = TRIPS_URL, timeout_seconds: float = 10) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds

    def fetch_trips(self) -> list[Trip]:
        logger.debug("Fetching trips from %s", self._url)
        try:
            response = requests.get(self._url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            logger.error("Trip feed request failed: %s", exc)
            raise NetworkError(exc) from exc

        if response.status_code != 200:
            logger.error("Trip feed returned status %s", response.status_code)
            raise InvalidResponseError(response.status_code, response.text.strip()[:ERROR_BODY_LIMIT])

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodingError("Trip feed response was not valid JSON") from exc

        trips = list(Trips.from_dict(payload).trips)
        logger.info("Decoded %d trips", len(trips))
        return trips


class FixtureTripClient:
    """Returns the fixed three-trip fixture after an optional delay."""

    def __init__(self, delay_seconds: float = 0) -> None:
        self._delay_seconds = delay_seconds

    def fetch_trips(self) -> list[Trip]:
        if self._delay_seconds > 0:
            time.sleep(self._delay_seconds)
        return list(FIXTURE_TRIPS.trips)


class FailingTripClient:
    """Always raises the error it was built with."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    def fetch_trips(self) -> list[Trip]:
        raise self._error


__all__ = [
    "TRIPS_URL",
    "ERROR_BODY_LIMIT",
    "TripClient",
    "TripClientError",
    "LiveTripClient",
    "FixtureTripClient",
    "FailingTripClient",
    "NetworkError",
    "InvalidResponseError",
    "DecodingError",
]
