"""Observability – structured logging for the generator and generated facades."""

from log_taxonomy.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
