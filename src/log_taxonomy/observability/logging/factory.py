"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from log_taxonomy.observability.logging.processors import (
    EVENT_ID_KEY,
    EVENT_PATH_KEY,
    EventFieldsProcessor,
)


class JsonLoggerFactory:
    """Configure structlog and the stdlib root logger for JSON output.

    Records written by generated entry points go through plain
    :mod:`logging`; the formatter's pre-chain merges the ``EventPath`` scope
    and lifts the ``event_id`` / ``event_path`` extras into the JSON payload.
    """

    @staticmethod
    def shared_processors() -> list[Any]:
        return [
            structlog.contextvars.merge_contextvars,
            EventFieldsProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

    @staticmethod
    def configure(level: int = logging.INFO, handler: logging.Handler | None = None) -> logging.Handler:
        """Install a JSON handler on the root logger and return it."""
        shared = JsonLoggerFactory.shared_processors()
        structlog.configure(
            processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.ExtraAdder(allow=[EVENT_ID_KEY, EVENT_PATH_KEY]),
                *shared,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = handler or logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        return handler


__all__ = ["JsonLoggerFactory"]
