"""Runtime – EventLogger, the entry point behind every generated leaf."""
from __future__ import annotations

import logging

from structlog.contextvars import bound_contextvars

from log_taxonomy.observability.logging.processors import EVENT_ID_KEY, EVENT_PATH_KEY, SCOPE_KEY
from log_taxonomy.runtime.levels import LogLevel

# caller -> log()/info() -> _write() -> Logger.log()
_STACKLEVEL = 3


class EventLogger:
    """Writes to a category logger under a fixed event id and path.

    Every enabled write runs inside a structlog context-var scope
    ``{"EventPath": event_path}`` and attaches ``event_id`` / ``event_path``
    as record extras.  Disabled levels return before any work is done.

    Parameters
    ----------
    category:
        The caller's category logger (see
        :func:`log_taxonomy.runtime.facades.category_for`).
    event_id:
        Numeric event identifier.
    event_path:
        Dotted, stable event path.
    """

    __slots__ = ("_category", "_event_id", "_event_path")

    def __init__(self, category: logging.Logger, event_id: int, event_path: str) -> None:
        if category is None:
            raise TypeError("category must not be None")
        if event_path is None:
            raise TypeError("event_path must not be None")
        self._category = category
        self._event_id = event_id
        self._event_path = event_path

    @property
    def event_id(self) -> int:
        return self._event_id

    @property
    def event_path(self) -> str:
        return self._event_path

    def __repr__(self) -> str:
        return f"EventLogger(id={self._event_id}, path={self._event_path!r})"

    def is_enabled(self, level: int) -> bool:
        return self._category.isEnabledFor(int(level))

    def log(
        self,
        level: int,
        message: str,
        *args: object,
        exc_info: BaseException | bool | None = None,
    ) -> None:
        self._write(int(level), message, args, exc_info)

    def _write(
        self,
        level: int,
        message: str,
        args: tuple[object, ...],
        exc_info: BaseException | bool | None,
    ) -> None:
        if not self._category.isEnabledFor(level):
            return
        with bound_contextvars(**{SCOPE_KEY: self._event_path}):
            self._category.log(
                level,
                message,
                *args,
                exc_info=exc_info,
                extra={EVENT_ID_KEY: self._event_id, EVENT_PATH_KEY: self._event_path},
                stacklevel=_STACKLEVEL,
            )

    def trace(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.TRACE, message, args, exc_info)

    def debug(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.DEBUG, message, args, exc_info)

    def info(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.INFORMATION, message, args, exc_info)

    def warning(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.WARNING, message, args, exc_info)

    def error(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.ERROR, message, args, exc_info)

    def critical(self, message: str, *args: object, exc_info: BaseException | bool | None = None) -> None:
        self._write(LogLevel.CRITICAL, message, args, exc_info)


__all__ = ["EventLogger"]
