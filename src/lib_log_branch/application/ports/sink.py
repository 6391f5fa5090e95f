"""Sink port describing how buffered entries are rendered.

Purpose
-------
Define the single capability the logger consumes when it flushes: one
rendering operation per level, each taking the finished message text.

Contents
--------
* :class:`LogSinkPort` - runtime-checkable protocol with ``info``,
  ``warning`` and ``error`` channels.

System Role
-----------
Keeps :class:`lib_log_branch.Logger` ignorant of consoles, files or stdlib
handlers; adapters in :mod:`lib_log_branch.adapters` plug in here.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSinkPort(Protocol):
    """Render a message on the channel matching its level."""

    def info(self, message: str) -> None:
        """Render an informational ``message``."""

    def warning(self, message: str) -> None:
        """Render a warning ``message``."""

    def error(self, message: str) -> None:
        """Render an error ``message``."""


__all__ = ["LogSinkPort"]
