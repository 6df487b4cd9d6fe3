"""Observability – structured logging."""
from launcher_flags.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
