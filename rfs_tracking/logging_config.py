"""structlog setup for the API process."""

import logging

import structlog

from rfs_tracking.config import settings


def configure_logging() -> None:
    """Configure structlog processors and the stdlib root logger.

    JSON output when ``settings.json_logs`` is set (container deployments),
    colored console output otherwise.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    # uvicorn and sqlalchemy log through the stdlib
    logging.basicConfig(format="%(message)s", level=level)
