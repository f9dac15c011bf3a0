"""Log levels understood by entry points (stdlib-compatible numbers)."""
from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = logging.DEBUG
    INFORMATION = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE, "TRACE")

__all__ = ["LogLevel"]
