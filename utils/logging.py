"""
Enhanced Logging Utilities

Provides structured logging with contextual information for API client debugging.
Implements hybrid approach: human-readable console + structured JSON files.
"""
import contextvars
import json
import logging
import os
import time
import uuid
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional, Union

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

logger = logging.getLogger(f'{__name__}.logging_utils')

JSONValue = Union[
    str,
    int,
    float,
    bool,
    None,
    dict[str, Any],   # nested object
    list[Any]         # arrays
]

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
CONSOLE_HANDLER_NAME = 'webdock-console'
JSON_HANDLER_NAME = 'webdock-json'


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured file logging."""

    def format(self, record) -> str:
        """Format log record as JSON with context information."""
        log_obj: dict[str, JSONValue] = {
            'timestamp': datetime.now().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if hasattr(record, 'funcName') and record.funcName:
            log_obj['function'] = record.funcName
        if hasattr(record, 'lineno') and record.lineno:
            log_obj['line'] = record.lineno

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else 'Unknown',
                'message': str(record.exc_info[1]) if record.exc_info[1] else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get({})
        if context:
            log_obj['context'] = context.copy()

            # Promote trace_id to standard key if available in context
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        # Add custom fields from extra parameter
        excluded_keys = {
            'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
            'filename', 'module', 'lineno', 'funcName', 'created',
            'msecs', 'relativeCreated', 'thread', 'threadName',
            'processName', 'process', 'getMessage', 'exc_info',
            'exc_text', 'stack_info', 'taskName'
        }

        extra_data = {}
        for key, value in record.__dict__.items():
            if key not in excluded_keys:
                try:
                    json.dumps(value)
                    extra_data[key] = value
                except (TypeError, ValueError):
                    extra_data[key] = str(value)

        if extra_data:
            log_obj['extra'] = extra_data

        return json.dumps(log_obj, ensure_ascii=False) + '\n'


class ContextualLogger:
    """
    Logger wrapper that provides contextual information and structured logging.

    Keyword arguments passed to the logging methods become structured fields
    on the record (resource, method, status, ...).
    """

    def __init__(self, logger_name: str):
        """
        Initialize contextual logger.

        Args:
            logger_name: Name for the underlying logger
        """
        self.logger = logging.getLogger(logger_name)
        self._start_time: Optional[float] = None

    def start_operation(self, operation_name: Optional[str] = None) -> str:
        """
        Start timing an operation and generate a trace ID.

        Args:
            operation_name: Optional name for the operation being tracked

        Returns:
            Generated trace ID for this operation
        """
        self._start_time = time.time()
        trace_id = str(uuid.uuid4())[:8]

        current_context = log_context.get({}).copy()
        current_context['trace_id'] = trace_id
        if operation_name:
            current_context['operation'] = operation_name
        log_context.set(current_context)

        return trace_id

    def end_operation(self, trace_id: str, operation_result: str = "completed") -> None:
        """
        End an operation and log the final duration.

        Args:
            trace_id: The trace ID returned by start_operation
            operation_result: Result status (e.g., "completed", "failed")
        """
        if self._start_time is None:
            self.warning("end_operation called without corresponding start_operation")
            return

        duration_ms = int((time.time() - self._start_time) * 1000)

        current_context = log_context.get({}).copy()

        self.info(f"Operation {operation_result}",
                  trace_id=trace_id,
                  final_duration_ms=duration_ms,
                  operation_result=operation_result)

        current_context.pop('operation', None)
        if current_context.get('trace_id') == trace_id:
            current_context.pop('trace_id', None)
        log_context.set(current_context)

        self._start_time = None

    def _get_duration_ms(self) -> Optional[int]:
        """Get operation duration in milliseconds if start_operation was called."""
        if self._start_time:
            return int((time.time() - self._start_time) * 1000)
        return None

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        duration = self._get_duration_ms()
        if duration is not None:
            kwargs['duration_ms'] = duration
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        duration = self._get_duration_ms()
        if duration is not None:
            kwargs['duration_ms'] = duration
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        duration = self._get_duration_ms()
        if duration is not None:
            kwargs['duration_ms'] = duration
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """
        Log error message with context and exception information.

        Args:
            message: Error message
            error: Optional exception object
            **kwargs: Additional context
        """
        duration = self._get_duration_ms()
        if duration is not None:
            kwargs['duration_ms'] = duration

        if error:
            kwargs['error'] = {
                'type': type(error).__name__,
                'message': str(error)
            }
            self.logger.error(message, exc_info=True, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)


def set_request_context(
    resource: Optional[str] = None,
    method: Optional[str] = None,
    object_id: Optional[Union[str, int]] = None,
    **additional_context
):
    """
    Set API request context for logging.

    Args:
        resource: Logical resource name (e.g., 'servers')
        method: HTTP verb
        object_id: Server slug or numeric id the request targets
        **additional_context: Any additional context to include
    """
    context = log_context.get({}).copy()

    if resource:
        context['resource'] = resource
    if method:
        context['method'] = method
    if object_id is not None:
        context['object_id'] = str(object_id)

    context.update(additional_context)

    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """
    Get a contextual logger instance.

    Args:
        logger_name: Name for the logger (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logger_name)


def setup_logging(log_level: Optional[str] = None, json_log_path: Optional[str] = None) -> logging.Logger:
    """
    Configure hybrid logging: human-readable console + optional structured JSON file.

    The client never calls this itself; applications opt in.

    Args:
        log_level: Level name, defaults to the configured log_level
        json_log_path: Path of a rotating JSON log file, or None for console only

    Returns:
        The configured root logger
    """
    if log_level is None:
        from config import get_config
        log_level = get_config().log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid duplicate handlers when called more than once
    installed = {handler.name for handler in root_logger.handlers}

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if json_log_path and JSON_HANDLER_NAME not in installed:
        log_dir = os.path.dirname(json_log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        json_handler = RotatingFileHandler(
            json_log_path,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5
        )
        json_handler.set_name(JSON_HANDLER_NAME)
        json_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(json_handler)

    return root_logger
