"""
Observability module.

Provides logging configuration and structured-context logging helpers.
"""

from picvoter.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from picvoter.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
