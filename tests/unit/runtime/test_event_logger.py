"""Unit tests for EventLogger."""

from __future__ import annotations

import logging

import pytest
from structlog.contextvars import get_contextvars

from log_taxonomy.runtime import EventEntryPoint, EventLogger, LogLevel
from log_taxonomy.testing.fakes import RecordingHandler

_PATH = "MyApp.Db.Connection.Open"


@pytest.fixture
def entry_point(category: logging.Logger) -> EventLogger:
    return EventLogger(category, 2000, _PATH)


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


class TestEventLoggerWrites:
    def test_record_carries_level_id_and_path(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        handler = RecordingHandler.attach(category)
        entry_point.info("opened %s", "primary")
        captured = handler.last
        assert captured.level == logging.INFO
        assert captured.message == "opened primary"
        assert captured.event_id == 2000
        assert captured.event_path == _PATH

    def test_scope_active_during_write_only(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        handler = RecordingHandler.attach(category)
        entry_point.warning("slow")
        assert handler.last.scope == {"EventPath": _PATH}
        assert "EventPath" not in get_contextvars()

    def test_log_with_explicit_level(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        handler = RecordingHandler.attach(category)
        entry_point.log(LogLevel.ERROR, "failed after %d tries", 3)
        assert handler.last.level == logging.ERROR
        assert handler.last.message == "failed after 3 tries"

    def test_each_level_method(self, category: logging.Logger, entry_point: EventLogger) -> None:
        handler = RecordingHandler.attach(category, LogLevel.TRACE)
        entry_point.trace("t")
        entry_point.debug("d")
        entry_point.info("i")
        entry_point.warning("w")
        entry_point.error("e")
        entry_point.critical("c")
        assert [c.level for c in handler.captured] == [5, 10, 20, 30, 40, 50]
        assert handler.captured[0].record.levelname == "TRACE"

    def test_exception_attached(self, category: logging.Logger, entry_point: EventLogger) -> None:
        handler = RecordingHandler.attach(category)
        try:
            raise RuntimeError("connection refused")
        except RuntimeError as exc:
            entry_point.error("open failed", exc_info=exc)
        exc_info = handler.last.record.exc_info
        assert exc_info is not None
        assert exc_info[0] is RuntimeError

    def test_caller_location_is_the_call_site(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        handler = RecordingHandler.attach(category)
        entry_point.info("here")
        entry_point.log(logging.INFO, "and here")
        assert handler.captured[0].record.funcName == "test_caller_location_is_the_call_site"
        assert handler.captured[1].record.funcName == "test_caller_location_is_the_call_site"


# ---------------------------------------------------------------------------
# Levels and arguments
# ---------------------------------------------------------------------------


class TestEventLoggerLevels:
    def test_disabled_level_writes_nothing(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        handler = RecordingHandler.attach(category, logging.WARNING)
        entry_point.info("ignored")
        entry_point.debug("ignored")
        assert handler.captured == []

    def test_is_enabled_follows_category(
        self, category: logging.Logger, entry_point: EventLogger
    ) -> None:
        category.setLevel(logging.WARNING)
        assert not entry_point.is_enabled(LogLevel.INFORMATION)
        assert entry_point.is_enabled(LogLevel.ERROR)

    def test_none_category_rejected(self) -> None:
        with pytest.raises(TypeError):
            EventLogger(None, 1, "A.B")  # type: ignore[arg-type]

    def test_none_path_rejected(self, category: logging.Logger) -> None:
        with pytest.raises(TypeError):
            EventLogger(category, 1, None)  # type: ignore[arg-type]

    def test_satisfies_entry_point_protocol(self, entry_point: EventLogger) -> None:
        assert isinstance(entry_point, EventEntryPoint)
        assert entry_point.event_id == 2000
        assert entry_point.event_path == _PATH
