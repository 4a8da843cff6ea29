"""Logging setup for the service process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Configure the root logger with the service format and ``level``."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
