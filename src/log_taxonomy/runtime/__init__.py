"""Runtime – entry points, facade materialisation, registration and discovery."""

from log_taxonomy.runtime.levels import LogLevel
from log_taxonomy.runtime.protocol import EventEntryPoint
from log_taxonomy.runtime.event_logger import EventLogger
from log_taxonomy.runtime.facades import CompositeFacade, FacadeSet, RootFacade, category_for, materialize
from log_taxonomy.runtime.registration import ServiceCollection, add_generated_logging
from log_taxonomy.runtime.discovery import describe, is_event_source, log_event_source

__all__ = [
    "CompositeFacade",
    "EventEntryPoint",
    "EventLogger",
    "FacadeSet",
    "LogLevel",
    "RootFacade",
    "ServiceCollection",
    "add_generated_logging",
    "category_for",
    "describe",
    "is_event_source",
    "log_event_source",
    "materialize",
]
