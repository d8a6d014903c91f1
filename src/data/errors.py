"""Errors raised by trip feed clients."""

from __future__ import annotations


class TripClientError(Exception):
    """Base class for trip feed failures."""


class NetworkError(TripClientError):
    """Raised when the request could not be sent or no response arrived."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Trip feed request failed: {cause}")
        self.cause = cause


class InvalidResponseError(TripClientError):
    """Raised when the feed answers with a non-200 status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        detail = f"Status {status_code}"
        if body:
            detail = f"{detail}, Body: {body}"
        super().__init__(f"Trip feed request failed: {detail}")
        self.status_code = status_code


class DecodingError(TripClientError):
    """Raised when feed data does not match the expected shape."""


__all__ = ["TripClientError", "NetworkError", "InvalidResponseError", "DecodingError"]
