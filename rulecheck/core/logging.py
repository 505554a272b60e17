"""Structured Logging System for rulecheck

Structured logging with:
- Colored, human-readable dev output
- JSON structured production output
- Per-run identifiers for correlating rule events
- Context propagation
"""
import logging
import sys
from contextlib import AbstractContextManager
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

from rulecheck.core.config import settings


def _censor_sensitive_keys(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that redacts sensitive information."""
    sensitive_keys = {"password", "token", "secret", "authorization", "cookie"}

    def _redact(obj: dict | list | str, depth: int = 0) -> dict | list | str:
        if depth > 5:  # Prevent infinite recursion
            return obj
        if isinstance(obj, dict):
            return {
                k: "[REDACTED]" if str(k).lower() in sensitive_keys else _redact(v, depth + 1)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [_redact(item, depth + 1) for item in obj]
        return obj

    return _redact(event_dict)


def _add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds service metadata."""
    event_dict.setdefault("service", "rulecheck")
    event_dict.setdefault("version", "0.1.0")
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and prod configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_service_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to settings.LOG_LEVEL
        json_logs: If True, output JSON format (for production). If False, colored console output.
            Defaults to settings.LOG_JSON.
    """
    if level is None: level = settings.LOG_LEVEL
    if json_logs is None: json_logs = settings.LOG_JSON

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # Formatter for stdlib logger (handles logs from third-party libs)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def generate_run_id() -> str:
    """Generate a short identifier for one validation run."""
    return str(uuid4())[:8]


def bound_context(**kwargs) -> AbstractContextManager[None]:
    """Bind key-value pairs to the logging context for the duration of a block.

    On exit the previous values (including ones bound by an enclosing block)
    are restored.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)


class LoggerRegistry:
    """Registry of pre-configured loggers for different package domains."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given domain."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"rulecheck.{name}")
        return cls._loggers[name]

    @staticmethod
    def is_enabled_for(name: str, level: int) -> bool:
        """Whether events at ``level`` from the domain reach a handler (stdlib level check)."""
        return logging.getLogger(f"rulecheck.{name}").isEnabledFor(level)


def validator_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validation runs and the conditional gate."""
    return LoggerRegistry.get("validator")


def rules_logger() -> structlog.stdlib.BoundLogger:
    """Logger for rule handlers and handler resolution."""
    return LoggerRegistry.get("rules")
