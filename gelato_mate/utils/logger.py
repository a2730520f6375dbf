"""
Logging configuration module for gelato-mate.

The library logs under the ``gelato_mate`` logger and never touches the
root logger. Applications that want the library's output can call
setup_logging(), which:

- Uses colored console output in development (GELATO_ENV=dev)
- Uses JSON lines everywhere else
- Installs a single handler, so repeated calls never duplicate log lines
"""

import json
import logging
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Dict, Optional

from gelato_mate.core.config import get_settings

PACKAGE_LOGGER = "gelato_mate"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for log levels and logger names in development environments."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[1;31m", # Bold Red
    }
    GREY = "\033[90m"
    RESET = "\033[0m"

    def formatTime(self, record, datefmt=None):
        """Override to include milliseconds in the timestamp."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s},{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        original_name = record.name

        log_color = self.COLORS.get(record.levelname, "")
        if log_color:
            record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        record.name = f"{self.GREY}{record.name}{self.RESET}"

        try:
            return super().format(record)
        finally:
            # Restore for the next handler
            record.levelname = original_levelname
            record.name = original_name


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging outside development."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


def _get_environment() -> str:
    return get_settings().env.lower()


def setup_logging() -> logging.Logger:
    """
    Configure the package logger from the current settings.

    Safe to call more than once: any handler installed by a previous call
    is replaced, so log lines are never emitted twice.

    Returns:
        logging.Logger: The configured ``gelato_mate`` logger
    """
    settings = get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)

    if settings.env.lower() == "dev":
        formatter: logging.Formatter = ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JSONFormatter()

    for handler in list(logger.handlers):
        if getattr(handler, "_gelato_mate", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler._gelato_mate = True
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the specified name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        logging.Logger: Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("context created")
    """
    return logging.getLogger(name)


def log_execution_time(func: Optional[Callable] = None, *, level: str = "DEBUG") -> Callable:
    """
    Decorator to log function execution time.

    Only active in dev and qa environments; elsewhere the wrapped
    function is called directly.

    Args:
        func: Function to decorate
        level: Log level for timing message (default: DEBUG)

    Example:
        >>> @log_execution_time(level="INFO")
        ... def convert(envelope):
        ...     pass
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if _get_environment() not in ("dev", "qa"):
                return f(*args, **kwargs)

            logger = get_logger(f.__module__)
            start_time = time.perf_counter()
            try:
                return f(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                log_method = getattr(logger, level.lower(), logger.debug)
                log_method(f"Function '{f.__name__}' executed in {elapsed:.4f}s")

        return wrapper

    # Allow usage with or without parentheses
    if func is None:
        return decorator
    return decorator(func)
