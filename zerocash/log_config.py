"""Shared logging configuration.

Call ``setup()`` once from the application factory (or any entry point) to
get ISO-8601 timestamps on every log line.
"""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup(level: str | int = logging.INFO, *, verbose: bool = False) -> None:
    """Configure the root logger with timestamped output.

    Args:
        level: Log level name or number used when ``verbose`` is off.
        verbose: If True, force DEBUG regardless of ``level``.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format=_LOG_FORMAT,
        datefmt=_DATE_FORMAT,
    )
