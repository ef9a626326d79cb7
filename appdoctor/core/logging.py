"""Logging setup.

Diagnostics about *how* the doctor ran (which commands were spawned, which
workflows were skipped) go through structlog to stderr. The report itself is
console output, not logging.

Environment variables:
    APPDOCTOR_LOG_LEVEL: Level for appdoctor loggers (default WARNING,
        DEBUG with --verbose).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

__all__ = ["get_logger", "setup_logging", "LOGGER_NAME", "LOG_LEVEL_ENV_VAR"]

LOGGER_NAME = "appdoctor"
LOG_LEVEL_ENV_VAR = "APPDOCTOR_LOG_LEVEL"


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger under the appdoctor namespace.

    Args:
        name: Module name (typically __name__). Names already under the
            namespace are used as-is.
    """
    if name is None or name == LOGGER_NAME:
        return structlog.get_logger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"{LOGGER_NAME}.{name}")


def format_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Fold bound key/value context into the event message."""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event
    return event_dict


def setup_logging(verbose: bool = False) -> None:
    """Configure stdlib logging and structlog for a CLI run.

    An unknown $APPDOCTOR_LOG_LEVEL falls back to the default level and is
    reported as a warning.
    """
    default_level = "DEBUG" if verbose else "WARNING"
    requested = os.environ.get(LOG_LEVEL_ENV_VAR, default_level).strip().upper()
    level = requested if requested in logging.getLevelNamesMapping() else default_level

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.getLogger(LOGGER_NAME).setLevel(level)
    if level != requested:
        get_logger(__name__).warning(
            "unknown log level, using default",
            env_var=LOG_LEVEL_ENV_VAR,
            requested=requested,
            fallback=level,
        )
