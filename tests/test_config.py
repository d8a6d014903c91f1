from __future__ import annotations

import textwrap

import pytest

from src.config import AppConfig, build_client, load_config
from src.data.trip_client import FixtureTripClient, LiveTripClient


VALID_YAML = """
feed:
  source: "live"
  url: "https://example.test/trips.json"
  timeout_seconds: 10
  fixture_delay_seconds: 1.5

display:
  timezone: "America/New_York"

logging:
  level: "INFO"
  log_dir: "logs/"
"""


def _write_yaml(tmp_path, contents: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(contents))
    return str(path)


@pytest.fixture(autouse=True)
def _no_feed_override(monkeypatch) -> None:
    monkeypatch.delenv("TRIP_FEED_URL", raising=False)
    monkeypatch.setattr("src.config.load_dotenv", lambda: None)


def test_load_config_valid(tmp_path) -> None:
    config = load_config(_write_yaml(tmp_path, VALID_YAML))

    assert isinstance(config, AppConfig)
    assert config.feed.source == "live"
    assert config.feed.url == "https://example.test/trips.json"
    assert config.feed.timeout_seconds == 10
    assert config.feed.fixture_delay_seconds == 1.5
    assert config.display.tz.key == "America/New_York"
    assert config.log.level == "INFO"


def test_env_overrides_feed_url(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TRIP_FEED_URL", "https://override.test/trips.json")

    config = load_config(_write_yaml(tmp_path, VALID_YAML))

    assert config.feed.url == "https://override.test/trips.json"


def test_fixture_delay_defaults_to_zero(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace("  fixture_delay_seconds: 1.5\n", ""))

    assert load_config(path).feed.fixture_delay_seconds == 0


def test_load_config_missing_file(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_config(str(tmp_path / "does_not_exist.yaml"))


def test_load_config_missing_feed_section(tmp_path) -> None:
    yaml_text = """
    display:
      timezone: "America/New_York"
    logging:
      level: "INFO"
      log_dir: "logs/"
    """

    with pytest.raises(ValueError):
        load_config(_write_yaml(tmp_path, yaml_text))


def test_load_config_unknown_source(tmp_path) -> None:
    with pytest.raises(ValueError) as exc_info:
        load_config(_write_yaml(tmp_path, VALID_YAML.replace('"live"', '"carrier-pigeon"')))

    assert "source" in str(exc_info.value)


def test_load_config_unknown_timezone(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_config(_write_yaml(tmp_path, VALID_YAML.replace("America/New_York", "Mars/Olympus_Mons")))


def test_load_config_top_level_not_mapping(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_config(_write_yaml(tmp_path, "- just\n- a list\n"))


def test_build_client_selects_source(tmp_path) -> None:
    live = load_config(_write_yaml(tmp_path, VALID_YAML))
    fixture = load_config(_write_yaml(tmp_path, VALID_YAML.replace('"live"', '"fixture"')))

    assert isinstance(build_client(live), LiveTripClient)
    assert isinstance(build_client(fixture), FixtureTripClient)
