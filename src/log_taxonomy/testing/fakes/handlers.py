"""Testing fakes – RecordingHandler."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

from structlog.contextvars import get_contextvars


@dataclasses.dataclass(frozen=True)
class CapturedRecord:
    """A log record plus the structlog context vars active while it was written."""

    record: logging.LogRecord
    scope: dict[str, Any]

    @property
    def message(self) -> str:
        return self.record.getMessage()

    @property
    def level(self) -> int:
        return self.record.levelno

    @property
    def event_id(self) -> int | None:
        return getattr(self.record, "event_id", None)

    @property
    def event_path(self) -> str | None:
        return getattr(self.record, "event_path", None)


class RecordingHandler(logging.Handler):
    """In-memory handler that records every record with its active scope.

    Usage::

        handler = RecordingHandler.attach(category)
        facade.Db.Connection.Open.info("opened %s", "primary")
        assert handler.last.scope == {"EventPath": "MyApp.Db.Connection.Open"}
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.captured: list[CapturedRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.captured.append(CapturedRecord(record, dict(get_contextvars())))

    @classmethod
    def attach(cls, logger: logging.Logger, level: int = logging.NOTSET) -> "RecordingHandler":
        """Attach a new handler to *logger* and set the logger's level."""
        handler = cls()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
        return handler

    @property
    def last(self) -> CapturedRecord:
        assert self.captured, "No record was written"
        return self.captured[-1]

    def reset(self) -> None:
        self.captured.clear()


__all__ = ["CapturedRecord", "RecordingHandler"]
