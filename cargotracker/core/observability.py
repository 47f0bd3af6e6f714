"""
Observability Infrastructure

Structured logging for the booking and routing workflows. Loggers are bound
with the tracking id of the cargo being handled so every entry of one
workflow step can be correlated.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import Settings, settings


def setup_structured_logging(config: Settings | None = None) -> None:
    """Configure structured logging with JSON or console output."""
    config = config or settings

    # Configure log level
    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=config.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
