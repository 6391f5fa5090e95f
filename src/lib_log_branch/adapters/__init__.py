"""Concrete sink and clock adapters for the branch logger."""

from __future__ import annotations

from .clock import SystemClock
from .console.rich_console import RichConsoleSink
from .logging_bridge import StdlibLoggingSink
from .memory import MemorySink

__all__ = ["MemorySink", "RichConsoleSink", "StdlibLoggingSink", "SystemClock"]
