"""Runtime – declaring event definition sources on Python enums.

Usage::

    @log_event_source(root_logger_name="MyLogger", base_path="MyApp")
    class SampleEvents(IntEnum):
        APP_Startup = 1000
        DB_Connection_Open = 2000
        DB_Connection_Close = 2001

    source = describe(SampleEvents)
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable, TypeVar, overload

from log_taxonomy.config.settings import GeneratorSettings
from log_taxonomy.kernel.errors import InvalidEventValueError, StructuralMisuseError
from log_taxonomy.kernel.model import EventDefinitionSource, Member

MARKER = "__log_event_source__"

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class LogEventSourceOptions:
    """Options attached by :func:`log_event_source`; blank values mean default."""

    root_logger_name: str | None = None
    namespace: str | None = None
    base_path: str | None = None


@overload
def log_event_source(target: T) -> T: ...


@overload
def log_event_source(
    target: None = None,
    *,
    root_logger_name: str | None = None,
    namespace: str | None = None,
    base_path: str | None = None,
) -> Callable[[T], T]: ...


def log_event_source(
    target: Any = None,
    *,
    root_logger_name: str | None = None,
    namespace: str | None = None,
    base_path: str | None = None,
) -> Any:
    """Mark a class as an event definition source.

    The marker is accepted on any class so that misuse can be reported by
    :func:`log_taxonomy.analysis.validate_declaration` rather than failing at
    import time.
    """
    options = LogEventSourceOptions(root_logger_name, namespace, base_path)

    def mark(cls: T) -> T:
        setattr(cls, MARKER, options)
        return cls

    return mark(target) if target is not None else mark


def is_event_source(target: object) -> bool:
    return isinstance(getattr(target, MARKER, None), LogEventSourceOptions)


def describe(target: object, settings: GeneratorSettings | None = None) -> EventDefinitionSource:
    """Read the event definition source declared by *target*.

    Members come from ``__members__`` in declaration order, aliases included.

    Raises
    ------
    StructuralMisuseError
        *target* is not an :class:`enum.Enum` subclass.
    InvalidEventValueError
        A value is not an integer or does not fit the event-id width.
    EmptySourceError
        The enum declares no members.
    """
    if not (isinstance(target, type) and issubclass(target, enum.Enum)):
        raise StructuralMisuseError(target)
    settings = settings or GeneratorSettings()
    options = getattr(target, MARKER, None) or LogEventSourceOptions()
    id_range = settings.event_id_range

    members: list[Member] = []
    for name, member in target.__members__.items():
        value = member.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidEventValueError(
                target.__name__, name, value, "event identifiers must be integers"
            )
        if value not in id_range:
            raise InvalidEventValueError(
                target.__name__,
                name,
                value,
                f"does not fit a {settings.event_id_bits}-bit signed event id",
            )
        members.append(Member(name, int(value)))

    return EventDefinitionSource(
        source_name=target.__name__,
        members=tuple(members),
        root_facade_name=options.root_logger_name or "",
        base_path=options.base_path,
        declared_namespace=(options.namespace or "").strip() or target.__module__,
    )


__all__ = ["MARKER", "LogEventSourceOptions", "describe", "is_event_source", "log_event_source"]
