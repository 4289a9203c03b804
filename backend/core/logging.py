"""Structured Logging for the predicate registry

- structlog over the stdlib logging tree, rendered to stderr
- Console output for development, JSON lines when LOG_JSON is set
- Context propagation via contextvars
- Subjects under validation are never written out
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

SERVICE_NAME = "predicate-registry"
SERVICE_VERSION = "0.1.0"

# Keys whose values may carry the string being validated or a credential
_REDACTED_KEYS = frozenset({"subject", "value", "password", "token", "secret"})


def _redact_subjects(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor that masks redacted keys, including one level of nesting."""
    for key, item in event_dict.items():
        if key.lower() in _REDACTED_KEYS:
            event_dict[key] = "[REDACTED]"
        elif isinstance(item, dict):
            event_dict[key] = {
                k: "[REDACTED]" if str(k).lower() in _REDACTED_KEYS else v
                for k, v in item.items()
            }
    return event_dict


def _add_service_info(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_service_info,
        _redact_subjects,
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of console output
    """
    shared_processors = get_shared_processors()

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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_logs),
        ],
    ))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to every subsequent log line in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


class LoggerRegistry:
    """Named loggers under the `predicates.` namespace."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"predicates.{name}")
        return cls._loggers[name]


def registry_logger() -> structlog.stdlib.BoundLogger:
    """Composition, extension and lookup events."""
    return LoggerRegistry.get("registry")


def guard_logger() -> structlog.stdlib.BoundLogger:
    """Rejected guard parameters."""
    return LoggerRegistry.get("guards")
