"""Display formatting for trips and trip groups."""

from src.rendering.formatters import (
    error_message,
    format_addresses,
    format_clock,
    format_currency,
    format_date_key,
    format_date_label,
    format_riders,
    format_time_range,
    shorten_address,
)

__all__ = [
    "error_message",
    "format_addresses",
    "format_clock",
    "format_currency",
    "format_date_key",
    "format_date_label",
    "format_riders",
    "format_time_range",
    "shorten_address",
]
