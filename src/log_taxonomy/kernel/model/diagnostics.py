"""Diagnostic records produced by the validator."""

from __future__ import annotations

import dataclasses
from enum import Enum


class Severity(str, Enum):
    """Diagnostic severity, ordered from most to least severe."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclasses.dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """Static description of one diagnostic kind."""

    code: str
    title: str
    message_format: str
    category: str
    severity: Severity
    enabled_by_default: bool = True

    def format(self, *arguments: object) -> str:
        return self.message_format.format(*arguments)


@dataclasses.dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported violation.

    ``subject_member_name`` is ``None`` for declaration-level findings such as
    structural misuse.
    """

    descriptor: DiagnosticDescriptor
    subject_member_name: str | None
    message_arguments: tuple[object, ...] = ()

    @property
    def code(self) -> str:
        return self.descriptor.code

    @property
    def severity(self) -> Severity:
        return self.descriptor.severity

    @property
    def message(self) -> str:
        return self.descriptor.format(*self.message_arguments)

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "severity": self.severity.value,
            "member": self.subject_member_name,
            "message": self.message,
        }


__all__ = ["Diagnostic", "DiagnosticDescriptor", "Severity"]
