"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from ..config import get_settings


def setup_logging(log_level: str | None = None, json_output: bool | None = None):
    """Configure structlog output for an application embedding numscan.

    Arguments left as ``None`` fall back to ``NUMSCAN_LOG_LEVEL`` and
    ``NUMSCAN_LOG_JSON``. Output goes to stderr so a CLI can keep stdout for
    parsed numbers. numscan's own modules never call this.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
