"""Buffered log entry recorded inside a logger branch.

Purpose
-------
Represent one buffered fact (level, label, message, timestamp) together with
the single piece of mutable state the logger needs: whether the entry has
already reached a sink.

Contents
--------
* :class:`LogEntry` dataclass with a one-shot render flag.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Owned by exactly one logger group; the render flag is flipped only by
:meth:`lib_log_branch.Logger.write`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True, eq=False)
class LogEntry:
    """Log entry buffered in a branch until the owning logger writes it.

    Attributes
    ----------
    level:
        :class:`LogLevel` selecting the sink channel.
    message:
        Human-readable text handed to the sink verbatim.
    timestamp:
        Creation time in timezone-aware UTC.
    name:
        Optional label of the sub-operation that produced the entry; ``None``
        for error entries.
    """

    level: LogLevel
    message: str
    timestamp: datetime
    name: str | None = None
    _rendered: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))

    @property
    def has_been_rendered(self) -> bool:
        """Return ``True`` once the entry has been handed to a sink."""

        return self._rendered

    def mark_rendered(self) -> None:
        """Flip the render flag; an entry is rendered at most once.

        Examples
        --------
        >>> entry = LogEntry(LogLevel.INFO, 'msg', datetime(2025, 1, 1, tzinfo=timezone.utc))
        >>> entry.mark_rendered()
        >>> entry.has_been_rendered
        True
        >>> entry.mark_rendered()
        Traceback (most recent call last):
        ...
        RuntimeError: log entry has already been rendered
        """
        if self._rendered:
            raise RuntimeError("log entry has already been rendered")
        object.__setattr__(self, "_rendered", True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry to a dictionary with an ISO8601 timestamp."""

        data: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.severity,
            "message": self.message,
            "rendered": self._rendered,
        }
        if self.name is not None:
            data["name"] = self.name
        return data


__all__ = ["LogEntry"]
