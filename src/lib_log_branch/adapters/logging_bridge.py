"""Sink forwarding flushed entries to the stdlib :mod:`logging` tree.

Lets hosts that already configure ``logging`` handlers receive branch logger
output without a second console. The level mapping reuses
:meth:`LogLevel.to_python_level`.
"""

from __future__ import annotations

import logging

from lib_log_branch.application.ports.sink import LogSinkPort
from lib_log_branch.domain.levels import LogLevel


class StdlibLoggingSink(LogSinkPort):
    """Emit each rendered message on a :class:`logging.Logger`."""

    def __init__(self, target: logging.Logger | str = "lib_log_branch") -> None:
        self._logger = logging.getLogger(target) if isinstance(target, str) else target

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, message: str) -> None:
        self._logger.log(LogLevel.INFO.to_python_level(), message)

    def warning(self, message: str) -> None:
        self._logger.log(LogLevel.WARNING.to_python_level(), message)

    def error(self, message: str) -> None:
        self._logger.log(LogLevel.ERROR.to_python_level(), message)


__all__ = ["StdlibLoggingSink"]
