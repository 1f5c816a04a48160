"""structlog bootstrap for envfunc.

Resolution events (``env_parse_fallback``) are emitted through structlog.
Embedders that want them in JSON call ``configure_logging(json_logs=True)``
before building a registry.
"""

from __future__ import annotations

import logging
from typing import Any, List

import structlog


_LOG_CONFIGURED = False


def _log_level(level: str) -> int:
    return getattr(logging, str(level or "INFO").upper(), logging.INFO)


def _processors(json_logs: bool) -> List[Any]:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False, *, force: bool = False) -> None:
    """Configure stdlib logging and structlog.

    Only the first call takes effect unless *force* is set, so repeated
    ``build_registry`` calls keep the embedder's configuration.
    """
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED and not force:
        return

    log_level = _log_level(level)
    logging.basicConfig(level=log_level, format="%(message)s")
    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _LOG_CONFIGURED = True
