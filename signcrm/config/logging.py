"""
Structured logging configuration using structlog.

Development gets colored console output, everything else JSON. Log
events carry the app context plus, once bound, the acting user, so a
``job_saved`` or ``permission_denied`` line says who did it.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from signcrm.config.settings import get_settings


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add application context to log events."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def configure_logging(stream: TextIO | None = None) -> None:
    """
    Configure structlog for the application.

    Args:
        stream: Where log lines go. Defaults to stdout; the CLI passes
            stderr so its tables stay clean.
    """
    settings = get_settings()

    # Shared processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_app_context,
    ]

    if settings.environment == "development":
        # Development: colored console output
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        # Production: JSON output
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    # fpdf2 is chatty about font subsetting at INFO
    logging.getLogger("fpdf").setLevel(logging.WARNING)
    logging.getLogger("fontTools").setLevel(logging.WARNING)


def bind_acting_user(user_id: str | None, role: str | None = None) -> None:
    """Attach the logged-in user to every following log event."""
    structlog.contextvars.bind_contextvars(acting_user_id=user_id, acting_role=role)


def clear_acting_user() -> None:
    structlog.contextvars.unbind_contextvars("acting_user_id", "acting_role")


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
