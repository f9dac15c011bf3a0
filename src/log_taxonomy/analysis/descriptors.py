"""Diagnostic descriptors with stable codes."""
from __future__ import annotations

from log_taxonomy.kernel.model import DiagnosticDescriptor, Severity

DUPLICATE_VALUE = DiagnosticDescriptor(
    code="KLG0001",
    title="Duplicate log event value",
    message_format="Duplicate log event value '{0}' in enum '{1}'",
    category="Design",
    severity=Severity.ERROR,
)

ATTRIBUTE_ON_NON_ENUM = DiagnosticDescriptor(
    code="KLG0002",
    title="@log_event_source is only valid on enums",
    message_format="@log_event_source can only be applied to enums",
    category="Usage",
    severity=Severity.ERROR,
)

MISSING_SEPARATOR = DiagnosticDescriptor(
    code="KLG0003",
    title="Enum member name should contain an underscore",
    message_format=(
        "Enum member '{0}' should follow the 'AREA_Action' naming convention with at least one '_'"
    ),
    category="Style",
    severity=Severity.WARNING,
)

NON_POSITIVE_VALUE = DiagnosticDescriptor(
    code="KLG0004",
    title="Event identifiers should be positive",
    message_format="Log event '{0}' has non-positive value '{1}'",
    category="Usage",
    severity=Severity.WARNING,
)

SINGLE_MEMBER_AREA = DiagnosticDescriptor(
    code="KLG0005",
    title="Area token used only once",
    message_format="Area '{0}' is used only by event '{1}'",
    category="Style",
    severity=Severity.INFO,
    enabled_by_default=False,
)

DUPLICATE_EVENT_PATH = DiagnosticDescriptor(
    code="KLG0006",
    title="Duplicate event path",
    message_format="Log event '{0}' shares event path '{1}' with another member",
    category="Design",
    severity=Severity.WARNING,
)

ALL_DESCRIPTORS: tuple[DiagnosticDescriptor, ...] = (
    DUPLICATE_VALUE,
    ATTRIBUTE_ON_NON_ENUM,
    MISSING_SEPARATOR,
    NON_POSITIVE_VALUE,
    SINGLE_MEMBER_AREA,
    DUPLICATE_EVENT_PATH,
)

__all__ = [
    "ALL_DESCRIPTORS",
    "ATTRIBUTE_ON_NON_ENUM",
    "DUPLICATE_EVENT_PATH",
    "DUPLICATE_VALUE",
    "MISSING_SEPARATOR",
    "NON_POSITIVE_VALUE",
    "SINGLE_MEMBER_AREA",
]
