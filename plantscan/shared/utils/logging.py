# 📄 File: plantscan/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a smart logging system that records what happens in the scanner in a structured way,
# so failed lookups (which the user never sees) can still be diagnosed later.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting, contextual information and
# external API call tracking for application observability.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: shared API client, external service clients, enrichment service,
# scan controller, plantscan.main startup/shutdown

import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Optional

from pythonjsonlogger import jsonlogger

from plantscan.shared.config.settings import get_settings

# Context variable for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Global logging configuration
_logging_configured = False
_loggers_cache = {}

SERVICE_NAME = 'plantscan'


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextualFormatter(logging.Formatter):
    """
    Formatter that adds contextual information to log records.

    Adds request ID, hostname and service name to every message and
    appends structured extra fields as ``key=value`` pairs.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()

        message = super().format(record)
        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            pairs = ' '.join(f"{key}={value}" for key, value in extra_fields.items())
            message = f"{message} | {pairs}"
        return message


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            rename_fields={'levelname': 'level', 'name': 'logger', 'funcName': 'function', 'lineno': 'line'},
            json_ensure_ascii=False,
        )
        self.hostname = _hostname()

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()

        # Flatten the structured extras into a single object
        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    """Timing log lines for outgoing HTTP calls."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: Optional[int],
        duration_ms: float,
        success: bool,
        extra: Dict = None
    ):
        """One line per request; failures are logged at WARNING."""
        fields = {
            'event_type': 'external_api_call',
            'api_name': api_name,
            'endpoint': endpoint,
            'method': method,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
            'success': success,
        }
        fields.update(extra or {})

        self.logger.log(
            logging.INFO if success else logging.WARNING,
            f"{api_name} {method} {endpoint} -> {status_code} in {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )


# Keyword arguments that logging.Logger.log understands itself
_STDLIB_LOG_KWARGS = ('exc_info', 'stack_info', 'stacklevel')


class StructuredLogger:
    """
    Thin wrapper over ``logging.Logger`` that carries structured fields.

    ``extra`` (and any unknown keyword argument) ends up under
    ``record.extra_fields``, which both formatters know how to render.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        fields = dict(extra or {})
        log_kwargs = {}
        for key, value in kwargs.items():
            if key in _STDLIB_LOG_KWARGS:
                log_kwargs[key] = value
            else:
                fields[key] = value

        if fields:
            log_kwargs['extra'] = {'extra_fields': fields}
        self.logger.log(level, message, **log_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        extra: Dict = None
    ):
        """Log a state transition or other domain event."""
        fields = {'event_type': 'business_event', 'business_event_type': event_type}
        fields.update(extra or {})
        self.info(description, extra=fields)


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name; defaults to ``LOG_LEVEL`` from settings
        log_format: ``json`` or ``text``; defaults to ``LOG_FORMAT`` from settings
        enable_console: Attach a stdout handler

    Returns:
        The ``startup`` logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Return the cached ``StructuredLogger`` for ``name`` (usually ``__name__``)."""
    logger = _loggers_cache.get(name)
    if logger is None:
        logger = _loggers_cache[name] = StructuredLogger(name)
    return logger


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    fields = {'event_type': 'service_startup', 'service_name': service_name, 'version': version}
    fields.update(extra or {})
    get_logger('startup').info(f"{service_name} {version} starting", extra=fields)


def log_shutdown_event(service_name: str, extra: Dict = None):
    fields = {'event_type': 'service_shutdown', 'service_name': service_name}
    fields.update(extra or {})
    get_logger('shutdown').info(f"{service_name} stopped", extra=fields)
