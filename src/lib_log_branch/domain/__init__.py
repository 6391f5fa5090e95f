"""Domain entities and value objects used by the branch logger."""

from __future__ import annotations

from .entries import LogEntry
from .errors import LoggedError, LoggerTreeError, UnbalancedTrimError, UsageError
from .handled import HandledErrors
from .levels import LogLevel, coerce_level

__all__ = [
    "HandledErrors",
    "LogEntry",
    "LogLevel",
    "LoggedError",
    "LoggerTreeError",
    "UnbalancedTrimError",
    "UsageError",
    "coerce_level",
]
