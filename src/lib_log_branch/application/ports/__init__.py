"""Protocols the branch logger depends on."""

from __future__ import annotations

from .sink import LogSinkPort
from .time import ClockPort, UnitOfWork

__all__ = ["ClockPort", "LogSinkPort", "UnitOfWork"]
