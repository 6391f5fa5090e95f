"""Concrete clock port returning timezone-aware UTC timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

from lib_log_branch.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Clock backed by :func:`datetime.now` in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


__all__ = ["SystemClock"]
