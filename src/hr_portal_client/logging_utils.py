"""
Structured logging utilities for the HR portal client using structlog.

Console output for local development and tests, JSON output for production or
whenever LOG_FORMAT=json is set.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add service context to all logs.

    Fields added:
    - service.name: Logical service name (from SERVICE_NAME env var)
    - deployment.environment: Environment (development/staging/production)
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def build_processors(use_json: bool) -> list[Processor]:
    """Return the structlog processor chain for the chosen output format."""
    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]
    return processors


def configure_client_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog for the client.

    Args:
        service_name: Name reported as service.name (e.g., "hr-portal-client")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")

    Environment Variables:
        LOG_FORMAT: "json" for JSON, "console" for human-readable (default: console)
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    # Logs go to stderr so command output on stdout stays machine-readable
    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=build_processors(use_json),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_client_logger(name: str | None = None) -> Any:
    """
    Create a logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "gateway", "cli")

    Returns:
        A lazy structlog logger; configuration is resolved on first use, so
        module-level loggers pick up configure_client_logging called later.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
