"""Composition helpers translating :class:`LoggerSettings` into live adapters.

Keeps adapter selection in one place so :func:`lib_log_branch.create_logger`
and the CLI build sinks the same way.
"""

from __future__ import annotations

from lib_log_branch.adapters import MemorySink, RichConsoleSink, StdlibLoggingSink
from lib_log_branch.application.ports import LogSinkPort
from lib_log_branch.config import LoggerSettings


def build_sink(settings: LoggerSettings) -> LogSinkPort:
    """Return the sink selected by ``settings.sink``."""

    if settings.sink == "memory":
        return MemorySink()
    if settings.sink == "logging":
        return StdlibLoggingSink(settings.python_logger_name)
    return RichConsoleSink(
        force_color=settings.force_color,
        no_color=settings.no_color,
        styles=settings.resolved_styles(),
        show_icons=settings.show_icons,
    )


__all__ = ["build_sink"]
