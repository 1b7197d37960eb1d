"""
Structured logging utilities for Moodtunes.
"""
import json
import logging
import sys
import time
import traceback
from contextlib import contextmanager
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Generator

ROOT_LOGGER_NAME = "moodtunes"

SECRET_KEYS = {'password', 'secret', 'token', 'api_key', 'auth'}
REDACTED = "***REDACTED***"


@dataclass
class LogContext:
    """Context information for structured logging."""
    component: str
    operation: str
    metadata: Optional[Dict[str, Any]] = None


class JSONFormatter(logging.Formatter):
    """Renders a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage()
        }
        context = getattr(record, 'context', None)
        if context:
            log_entry["context"] = asdict(context)
        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            log_entry.update(extra_fields)
        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }
        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Human readable single-line records with trailing key=value fields."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {}
        context = getattr(record, 'context', None)
        if context:
            fields["component"] = context.component
            fields["operation"] = context.operation
        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            fields.update(extra_fields)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


def _create_formatter(fmt: str) -> logging.Formatter:
    return TextFormatter() if fmt == "text" else JSONFormatter()


def configure_logging(level: str = "INFO", fmt: str = "json") -> logging.Logger:
    """Attach the structured handler to the package root logger.

    Module loggers created with ``logging.getLogger(__name__)`` inside the
    package propagate here and share the same output format.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_create_formatter(fmt))
    root.addHandler(handler)
    root.propagate = False
    return root


class StructuredLogger:
    """Structured logger that emits records with context and extra fields."""

    def __init__(self, name: str, level: str = "INFO", fmt: str = "json"):
        """Initialize the structured logger.

        Args:
            name: Logger name (typically module name)
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            fmt: Output format, "json" or "text"
        """
        self.name = name
        self.fmt = fmt
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        if not name.startswith(ROOT_LOGGER_NAME):
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(_create_formatter(fmt))
            self.logger.addHandler(handler)
            self.logger.propagate = False
        self._context: Optional[LogContext] = None

    def _log(self, level: str, message: str, exc_info: bool = False, **kwargs) -> None:
        extra = {
            'context': self._context,
            'extra_fields': kwargs
        }
        getattr(self.logger, level.lower())(
            message,
            extra=extra,
            exc_info=exc_info
        )

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """Log an error message.

        Args:
            message: Log message
            exc_info: Include exception information
            **kwargs: Additional fields to include in log
        """
        self._log("ERROR", message, exc_info=exc_info, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, **kwargs)

    def with_context(self, context: LogContext) -> 'StructuredLogger':
        """Create a logger sharing this one's output, tagged with ``context``."""
        new_logger = StructuredLogger.__new__(StructuredLogger)
        new_logger.name = self.name
        new_logger.fmt = self.fmt
        new_logger.logger = self.logger
        new_logger._context = context
        return new_logger

    @contextmanager
    def operation_context(self, component: str, operation: str, **metadata) -> Generator['StructuredLogger', None, None]:
        """Context manager for operation logging with automatic start/end logging.

        Args:
            component: Component name performing the operation
            operation: Operation name
            **metadata: Additional metadata for the operation

        Yields:
            StructuredLogger instance with operation context
        """
        context = LogContext(
            component=component,
            operation=operation,
            metadata=metadata
        )
        contextual_logger = self.with_context(context)
        contextual_logger.debug(
            f"Starting operation: {operation}",
            operation_status="started"
        )
        start_time = time.perf_counter()
        try:
            yield contextual_logger
        except Exception as e:
            contextual_logger.error(
                f"Failed operation: {operation}",
                operation_status="failed",
                duration_seconds=time.perf_counter() - start_time,
                error_type=type(e).__name__,
                error_message=str(e)
            )
            raise
        contextual_logger.info(
            f"Completed operation: {operation}",
            operation_status="completed",
            duration_seconds=time.perf_counter() - start_time
        )

    def log_config(self, config: Dict[str, Any], exclude_secrets: bool = True) -> None:
        """Log configuration with optional secret filtering.

        Args:
            config: Configuration dictionary to log
            exclude_secrets: Whether to filter out sensitive information
        """
        if exclude_secrets:
            config = redact_secrets(config)
        self.info("Configuration loaded", config=config)


def redact_secrets(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with secret-looking keys masked, recursively."""
    filtered = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(secret_key in key_lower for secret_key in SECRET_KEYS) and not key_lower.endswith('_url'):
            filtered[key] = REDACTED if value else value
        elif isinstance(value, dict):
            filtered[key] = redact_secrets(value)
        else:
            filtered[key] = value
    return filtered
