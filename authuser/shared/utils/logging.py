# 📄 File: authuser/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in the user service in a
# structured way, so every line can be traced back to the request that produced it.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), request-id context
# propagation through contextvars, and a single dictConfig-driven setup entry point.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: authuser.main (startup), request logging middleware, every module logger

import logging
import logging.config
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from authuser.shared.config.settings import Settings, get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'authuser'

_logging_configured = False


class RequestContextFilter(logging.Filter):
    """
    Adds request ID, service name and hostname to every log record
    so both formatters can reference them.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('') or '-'
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)
        request_id = getattr(record, 'request_id', '-')
        if request_id and request_id != '-':
            log_record['request_id'] = request_id


def build_logging_config(log_level: str, log_format: str) -> dict:
    """Build the dictConfig mapping for the given level and format."""
    formatter = 'json' if log_format == 'json' else 'text'
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'request_context': {
                '()': RequestContextFilter,
            },
        },
        'formatters': {
            'json': {
                '()': JSONFormatter,
                'fmt': '%(message)s %(module)s %(funcName)s %(lineno)d',
            },
            'text': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'stream': sys.stdout,
                'level': log_level,
                'formatter': formatter,
                'filters': ['request_context'],
            },
        },
        'root': {
            'level': log_level,
            'handlers': ['console'],
        },
        'loggers': {
            'aiohttp': {'level': 'WARNING'},
            'asyncio': {'level': 'WARNING'},
            'amqp': {'level': 'WARNING'},
            'kombu': {'level': 'WARNING'},
            'sqlalchemy.engine': {'level': 'WARNING'},
            'uvicorn.access': {'level': 'WARNING'},
        },
    }


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure root logging from settings.

    Safe to call more than once; the last call wins.

    Returns:
        The ``startup`` logger, ready for the first lifecycle messages.
    """
    global _logging_configured

    settings = settings or get_settings()
    logging.config.dictConfig(build_logging_config(settings.LOG_LEVEL, settings.LOG_FORMAT))

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)


@contextmanager
def log_context(request_id: Optional[str] = None):
    """
    Context manager binding a request ID to every log line emitted inside it.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)
