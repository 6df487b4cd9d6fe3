"""Observability – structured logging helpers."""
from launcher_flags.observability.logging.factory import JsonLoggerFactory
from launcher_flags.observability.logging.processors import add_flag_fields, get_logger

__all__ = ["JsonLoggerFactory", "add_flag_fields", "get_logger"]
