"""Logging module for wacloud."""

from .context import clear_request_context, set_request_context
from .logger import ContextLogger, get_logger, setup_app_logging, setup_logging

__all__ = [
    "ContextLogger",
    "clear_request_context",
    "get_logger",
    "set_request_context",
    "setup_app_logging",
    "setup_logging",
]
