"""Observability – structlog configuration and logger helpers."""
from log_taxonomy.observability.logging.factory import JsonLoggerFactory
from log_taxonomy.observability.logging.processors import EventFieldsProcessor, get_logger

__all__ = ["EventFieldsProcessor", "JsonLoggerFactory", "get_logger"]
