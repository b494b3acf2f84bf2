"""Structured logging configuration.

Events are rendered as JSON by structlog and handed to stdlib logging,
which writes to stderr. Stdout is reserved for rendered HTML.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog


@lru_cache(maxsize=None)
def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True, default=str),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to a stdlib logger called ``name``."""
    _configure_structlog()
    return structlog.get_logger(name)
