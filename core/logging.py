"""
Structured logging.

Wraps structlog on top of the stdlib logging module so that every log line
carries the service name, level, logger name, timestamp and any context bound
through contextvars (e.g. the request correlation ID).

Usage:
    log = get_logger("pipeline").bind(pipeline="teams")
    log.info("stage_completed", records=10)
"""

import logging
import sys

import structlog


def _add_service(service_name: str):
    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def setup_logging(
    log_level: str = "INFO",
    json_format: bool = False,
    service_name: str = "ipl-stats-api",
) -> None:
    """Configure stdlib logging and structlog. Safe to call more than once."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _add_service(service_name),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally named after a component."""
    return structlog.get_logger(name or "ipl_stats")
