"""Structured logging."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "context",
    "get_context",
    "unbind",
    "StructuredLogger",
    "get_logger",
]
