"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

EVENT_ID_KEY = "event_id"
EVENT_PATH_KEY = "event_path"
SCOPE_KEY = "EventPath"


class EventFieldsProcessor:
    """structlog processor that folds the ``EventPath`` scope into ``event_path``.

    Records written through an entry point carry the path twice: once as the
    ``event_path`` extra and once as the bound ``EventPath`` context variable.
    This keeps a single ``event_path`` key in the rendered output.

    Usage::

        structlog.configure(processors=[
            structlog.contextvars.merge_contextvars,
            EventFieldsProcessor(),
            ...
        ])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        scope_path = event_dict.pop(SCOPE_KEY, None)
        if scope_path is not None:
            event_dict.setdefault(EVENT_PATH_KEY, scope_path)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["EVENT_ID_KEY", "EVENT_PATH_KEY", "SCOPE_KEY", "EventFieldsProcessor", "get_logger"]
