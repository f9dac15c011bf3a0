"""Generation-fatal errors.

Any of these means the whole event definition source is skipped: no partial
taxonomy or facade description is produced for it.
"""

from __future__ import annotations

from typing import Any

from log_taxonomy.kernel.errors.base import BaseError


class GenerationError(BaseError):
    """A source cannot be turned into a taxonomy."""

    default_code = "generation_error"

    def __init__(self, message: str, *, source_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.source_name = source_name
        if source_name is not None:
            self.detail.setdefault("source_name", source_name)


class EmptySourceError(GenerationError):
    """The source declares no usable members."""

    default_code = "empty_source"

    def __init__(self, source_name: str) -> None:
        super().__init__(
            f"Event definition source '{source_name}' has no members",
            source_name=source_name,
        )


class InvalidEventValueError(GenerationError):
    """A member's identifying value is not a representable integer."""

    default_code = "invalid_event_value"

    def __init__(self, source_name: str, member_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Member '{member_name}' of '{source_name}' has invalid value {value!r}: {reason}",
            source_name=source_name,
            detail={"member_name": member_name, "value": repr(value), "reason": reason},
        )
        self.member_name = member_name
        self.value = value
        self.reason = reason


class InvalidFacadeNameError(GenerationError):
    """The root facade name cannot be used as a Python class name."""

    default_code = "invalid_facade_name"

    def __init__(self, source_name: str, facade_name: str) -> None:
        super().__init__(
            f"Root facade name {facade_name!r} of '{source_name}' is not a valid class name",
            source_name=source_name,
            detail={"facade_name": facade_name},
        )
        self.facade_name = facade_name


class StructuralMisuseError(GenerationError):
    """The event-source marker was applied to something that is not an enum."""

    default_code = "structural_misuse"

    def __init__(self, target: object) -> None:
        name = getattr(target, "__qualname__", None) or repr(target)
        super().__init__(
            f"'{name}' is not an Enum; only enums can be event definition sources",
            source_name=name,
        )
        self.target = target


__all__ = [
    "EmptySourceError",
    "GenerationError",
    "InvalidEventValueError",
    "InvalidFacadeNameError",
    "StructuralMisuseError",
]
