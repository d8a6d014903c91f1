"""Configuration loader for the rides feed app."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
import yaml

from src.data.trip_client import FixtureTripClient, LiveTripClient, TripClient

FEED_SOURCES = ("live", "fixture")


@dataclass(frozen=True)
class FeedConfig:
    """Trip feed configuration."""

    source: str
    url: str
    timeout_seconds: int
    fixture_delay_seconds: float


@dataclass(frozen=True)
class DisplayConfig:
    """Display configuration for formatted times and dates."""

    timezone: str

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    feed: FeedConfig
    display: DisplayConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    feed_section = _require_key(data, "feed", "feed")
    display_section = _require_key(data, "display", "display")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(feed_section, dict):
        raise ValueError("'feed' config must be a mapping")
    if not isinstance(display_section, dict):
        raise ValueError("'display' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    source = _require_key(feed_section, "source", "feed")
    if source not in FEED_SOURCES:
        raise ValueError(f"'source' in feed config must be one of {FEED_SOURCES}, got {source!r}")

    url = os.environ.get("TRIP_FEED_URL", "").strip() or _require_key(feed_section, "url", "feed")

    feed = FeedConfig(
        source=source,
        url=url,
        timeout_seconds=_require_key(feed_section, "timeout_seconds", "feed"),
        fixture_delay_seconds=feed_section.get("fixture_delay_seconds", 0),
    )

    timezone_name = _require_key(display_section, "timezone", "display")
    try:
        ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone in display config: {timezone_name!r}") from exc
    display = DisplayConfig(timezone=timezone_name)

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(feed=feed, display=display, log=logging)


def build_client(config: AppConfig) -> TripClient:
    """Return the trip client selected by feed.source."""
    if config.feed.source == "fixture":
        return FixtureTripClient(delay_seconds=config.feed.fixture_delay_seconds)
    return LiveTripClient(url=config.feed.url, timeout_seconds=config.feed.timeout_seconds)
