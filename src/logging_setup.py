"""Logging setup driven by LoggingConfig."""

from __future__ import annotations

import logging
from pathlib import Path

from src.config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILENAME = "rides.log"


def configure_logging(config: LoggingConfig) -> None:
    """Attach a stream handler, plus a file handler when log_dir is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8"))

    level = logging.getLevelName(str(config.level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level!r}")

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
