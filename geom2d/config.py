"""Configuration constants and helpers for the geometry kernel."""

from __future__ import annotations

import logging

EPSILON = 1e-5

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
