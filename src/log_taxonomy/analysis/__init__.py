"""Analysis – static diagnostics over event definition sources."""

from log_taxonomy.analysis.descriptors import (
    ALL_DESCRIPTORS,
    ATTRIBUTE_ON_NON_ENUM,
    DUPLICATE_EVENT_PATH,
    DUPLICATE_VALUE,
    MISSING_SEPARATOR,
    NON_POSITIVE_VALUE,
    SINGLE_MEMBER_AREA,
)
from log_taxonomy.analysis.report import log_diagnostics
from log_taxonomy.analysis.validator import validate, validate_declaration

__all__ = [
    "ALL_DESCRIPTORS",
    "ATTRIBUTE_ON_NON_ENUM",
    "DUPLICATE_EVENT_PATH",
    "DUPLICATE_VALUE",
    "MISSING_SEPARATOR",
    "NON_POSITIVE_VALUE",
    "SINGLE_MEMBER_AREA",
    "log_diagnostics",
    "validate",
    "validate_declaration",
]
