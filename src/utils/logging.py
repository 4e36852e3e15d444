"""Structured logging for feedbackDesk.

One shared processor chain feeds either a coloured console renderer
(development) or a JSON renderer (``APP_ENV=production`` or
``json_output=True``).  Standard-library ``logging`` goes through the same
chain.

Two things differ from a plain structlog setup:

- Output goes to a stream (stderr by default), never stdout.  The console
  owns stdout for menus and prompts.
- :func:`redact_credentials` runs before rendering.  Store code logs
  usernames, never secrets, but any ``password``-like key that slips into an
  event is masked.
"""

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Any, TextIO

import structlog

from src.utils.errors import ConfigurationError

REDACTED = "***"
SENSITIVE_KEYS = frozenset({"password", "new_password", "password_digest", "digest"})

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def redact_credentials(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor: mask the values of credential-bearing keys."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def resolve_level(log_level: str) -> int:
    """Map a level name to its numeric value.

    Raises:
        ConfigurationError: For a name that is not a standard level.
    """
    try:
        return _LEVELS[log_level.strip().upper()]
    except KeyError:
        raise ConfigurationError(
            message=f"Unknown log level {log_level!r}",
            component="logging",
        ) from None


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (FATAL accepted).
        json_output: Force JSON lines even outside production.
        stream: Destination for log lines; defaults to ``sys.stderr``.

    Raises:
        ConfigurationError: If *log_level* is not a known level.
    """
    level = resolve_level(log_level)
    target = stream or sys.stderr
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"

    # Order matters: contextvars first, redaction before any renderer.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        redact_credentials,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=target.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(target)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a logger bound to *name*, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
