"""Runtime – entry point protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EventEntryPoint(Protocol):
    """Logging surface bound to one event id and path."""

    @property
    def event_id(self) -> int: ...

    @property
    def event_path(self) -> str: ...

    def is_enabled(self, level: int) -> bool: ...

    def log(
        self,
        level: int,
        message: str,
        *args: object,
        exc_info: BaseException | bool | None = None,
    ) -> None: ...


__all__ = ["EventEntryPoint"]
