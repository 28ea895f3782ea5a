"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

import structlog


def level_from_env(environ: Mapping[str, str] = os.environ) -> str:
    """Return ``debug`` when the runner has step debug logging enabled."""
    return "debug" if environ.get("RUNNER_DEBUG") == "1" else "info"


def setup_logging(level: str = "info") -> None:
    """Configure structlog for plain console output to stderr.

    Workflow commands (``::error::``) go to stdout, so log lines stay on
    stderr to keep the two apart.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
