"""
Structured logging setup.

Structlog with a stdlib bridge:
- configure_logging(): one-shot structlog + stdlib configuration
- get_logger(): logger bound to the calling component
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure structlog and the root stdlib logger.

    Only the first call takes effect. Renderer comes from LOG_FORMAT
    (json|console), level from LOG_LEVEL.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    log_level = getattr(
        logging, (level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO
    )
    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Loggers resolve sys.stdout per call, so a swapped stream is never held
        cache_logger_on_first_use=False,
    )

    # Route logging.getLogger() output (e.g. SQLAlchemy echo) through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger carrying `component`.

    Applies configure_logging() first, so library loggers honour
    LOG_LEVEL and LOG_FORMAT without an explicit setup call.
    """
    configure_logging()
    return structlog.get_logger(component=component)


def _select_renderer() -> Any:
    if os.getenv("LOG_FORMAT", "").lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
