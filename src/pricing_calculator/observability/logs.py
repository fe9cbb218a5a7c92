"""structlog configuration shared by the HTTP service and the quote CLI.

The service logs to stdout (JSON in production, console in development). The
CLI keeps stdout for the quote itself and sends warnings to stderr instead.
Money amounts are ``Decimal`` throughout the pricing core; they are rendered
as plain strings (``"1700.00"``) so JSON entries stay exact.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, TextIO

import structlog

SERVICE_NAME = "pricing-calculator"


def stringify_decimals(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render ``Decimal`` values in the event as their exact string form."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(
    production: bool = False,
    *,
    stream: TextIO | None = None,
    level: int | None = None,
) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
        stream: Write log lines here instead of stdout. Loggers writing to an
            explicit stream are not cached and render without colors.
        level: Override the minimum level implied by *production*.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        stringify_decimals,
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream is None)
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            log_level if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=stream is None,
    )

    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)
