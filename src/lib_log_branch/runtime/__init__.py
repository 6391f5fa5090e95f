"""Runtime façade building ready-to-use root loggers.

Purpose
-------
Give host applications one call that resolves configuration and returns a
root :class:`~lib_log_branch.Logger` wired to the configured sink.

Contents
--------
* :func:`create_logger` - composition root for root loggers.

System Role
-----------
Outer shell: reads settings from :mod:`lib_log_branch.config`, picks adapters
via :mod:`._composition`, and hands back the application-layer logger.
"""

from __future__ import annotations

from lib_log_branch.adapters.clock import SystemClock
from lib_log_branch.application.logger import DiagnosticHook, Logger
from lib_log_branch.application.ports import ClockPort, LogSinkPort
from lib_log_branch.config import LoggerSettings, load_settings

from ._composition import build_sink


def create_logger(
    settings: LoggerSettings | None = None,
    *,
    sink: LogSinkPort | None = None,
    clock: ClockPort | None = None,
    diagnostic_hook: DiagnosticHook = None,
) -> Logger:
    """Return a root logger configured from ``settings``.

    Inputs
    ------
    settings:
        Resolved :class:`LoggerSettings`; when ``None`` they are loaded from
        the environment via :func:`load_settings`.
    sink:
        Explicit sink overriding ``settings.sink``.
    clock:
        Timestamp source; :class:`SystemClock` when ``None``.
    diagnostic_hook:
        Forwarded to :class:`Logger` and inherited by its children.

    Examples
    --------
    >>> from lib_log_branch.adapters import MemorySink
    >>> log = create_logger(LoggerSettings(sink="memory"))
    >>> isinstance(log.sink, MemorySink), log.parent is None
    (True, True)
    """
    resolved = settings if settings is not None else load_settings()
    return Logger(
        sink=sink if sink is not None else build_sink(resolved),
        clock=clock if clock is not None else SystemClock(),
        max_depth=resolved.max_depth,
        diagnostic_hook=diagnostic_hook,
    )


__all__ = ["build_sink", "create_logger"]
