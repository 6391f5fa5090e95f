"""Public package surface of lib_log_branch.

``Logger`` is the core: a scoped, hierarchical buffer whose branches defer
rendering until they fail or are flushed. Sinks, configuration and the
composition helper :func:`create_logger` live alongside it.
"""

from __future__ import annotations

from .adapters import MemorySink, RichConsoleSink, StdlibLoggingSink
from .application import DiagnosticHook, Logger
from .application.ports import ClockPort, LogSinkPort
from .config import LoggerSettings, load_settings
from .domain import LogEntry, LoggedError, LoggerTreeError, LogLevel, UnbalancedTrimError, UsageError
from .lib_log_branch import summary_info
from .runtime import create_logger

__all__ = [
    "ClockPort",
    "DiagnosticHook",
    "LogEntry",
    "LogLevel",
    "LogSinkPort",
    "LoggedError",
    "Logger",
    "LoggerSettings",
    "LoggerTreeError",
    "MemorySink",
    "RichConsoleSink",
    "StdlibLoggingSink",
    "UnbalancedTrimError",
    "UsageError",
    "create_logger",
    "load_settings",
    "summary_info",
]
