"""Rich-powered console sink implementing :class:`LogSinkPort`.

Purpose
-------
Render flushed branch entries on a terminal: informational messages go to
stdout, warnings and errors to stderr, each styled per level.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleSink` - default sink of root loggers and of
  :func:`lib_log_branch.create_logger`.

System Role
-----------
Primary human-facing sink; honours ``force_color``/``no_color`` overrides and
style themes from :mod:`lib_log_branch.config`.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from lib_log_branch.application.ports.sink import LogSinkPort
from lib_log_branch.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleSink(LogSinkPort):
    """Render messages using Rich with per-level styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
        show_icons: bool = False,
    ) -> None:
        """Configure the output consoles with colour and style overrides.

        ``console`` receives INFO messages; ``error_console`` receives WARNING
        and ERROR messages. When only ``console`` is supplied it serves every
        level, which keeps recording consoles in tests simple.
        """
        force_terminal = True if force_color else None
        if console is None:
            console = Console(force_terminal=force_terminal, no_color=no_color)
            if error_console is None:
                error_console = Console(stderr=True, force_terminal=force_terminal, no_color=no_color)
        self._console = console
        self._error_console = error_console if error_console is not None else console
        self._no_color = no_color
        self._show_icons = show_icons
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    @property
    def styles(self) -> Mapping[LogLevel, str]:
        return dict(self._style_map)

    def info(self, message: str) -> None:
        self._print(self._console, LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self._print(self._error_console, LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Print an error ``message`` on the error console.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleSink(console=console).error('boom')
        >>> 'boom' in console.export_text()
        True
        """
        self._print(self._error_console, LogLevel.ERROR, message)

    def _print(self, console: Console, level: LogLevel, message: str) -> None:
        style = "" if self._no_color else self._style_map.get(level, "")
        line = f"{level.icon} {message}" if self._show_icons else message
        console.print(line, style=style, highlight=False, markup=False)


__all__ = ["RichConsoleSink"]
