"""Diagnostic reporting through structlog."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from log_taxonomy.kernel.model import Diagnostic, Severity
from log_taxonomy.observability.logging import get_logger

_METHODS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.INFO: "info",
}


def log_diagnostics(diagnostics: Iterable[Diagnostic], logger: Any = None) -> int:
    """Write each diagnostic at its severity's level; return the error count."""
    log = logger if logger is not None else get_logger(__name__)
    errors = 0
    for diagnostic in diagnostics:
        if diagnostic.severity is Severity.ERROR:
            errors += 1
        getattr(log, _METHODS[diagnostic.severity])(
            "taxonomy.diagnostic",
            code=diagnostic.code,
            member=diagnostic.subject_member_name,
            message=diagnostic.message,
        )
    return errors


__all__ = ["log_diagnostics"]
