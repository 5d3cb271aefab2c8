"""Logging setup shared by the CLI and the HTTP API."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper() or "INFO")
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = level
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("link_verdict").setLevel(resolved)
