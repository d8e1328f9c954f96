"""
vectorpro.core.logging
───────────────────────
Structured logs for the SDK: one event per outbound request and response,
with secret redaction applied before anything is rendered.

The SDK never touches global structlog configuration. Its loggers wrap the
stdlib ``vectorpro`` logger hierarchy with their own processor chain and
render each event to a JSON message, so the host application decides the
handlers, the level and whether the lines go anywhere at all:

    logging.getLogger("vectorpro").setLevel(logging.DEBUG)

Stack: structlog on top of stdlib logging
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from vectorpro.core.redact import structlog_redact_processor

ROOT_LOGGER_NAME = "vectorpro"

# Silent unless the host attaches a handler.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog_redact_processor,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger writing to the stdlib logger *name*.

    Usage:
        log = get_logger(__name__)
        log.debug("vector.request", method="GET", url="https://...")
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
