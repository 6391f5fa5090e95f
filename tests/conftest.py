from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_branch.adapters import MemorySink


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._current = start or datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        value = self._current
        self._current += timedelta(seconds=1)
        return value


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()
