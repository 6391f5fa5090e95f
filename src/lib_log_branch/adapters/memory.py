"""In-memory sink recording every rendered message in order.

Used by the CLI demo to summarise a run and by tests to assert exactly what
reached the sink and how often.
"""

from __future__ import annotations

from threading import Lock

from lib_log_branch.application.ports.sink import LogSinkPort
from lib_log_branch.domain.levels import LogLevel


class MemorySink(LogSinkPort):
    """Collect ``(LogLevel, message)`` pairs instead of printing them."""

    def __init__(self) -> None:
        self._records: list[tuple[LogLevel, str]] = []
        self._lock = Lock()

    def info(self, message: str) -> None:
        self._append(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self._append(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self._append(LogLevel.ERROR, message)

    def _append(self, level: LogLevel, message: str) -> None:
        with self._lock:
            self._records.append((level, message))

    @property
    def records(self) -> list[tuple[LogLevel, str]]:
        """Return a copy of the recorded pairs, oldest first."""
        with self._lock:
            return list(self._records)

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Return recorded messages, optionally only those at ``level``.

        Examples
        --------
        >>> sink = MemorySink()
        >>> sink.info('a'); sink.error('b')
        >>> sink.messages(), sink.messages(LogLevel.ERROR)
        (['a', 'b'], ['b'])
        """
        return [message for lvl, message in self.records if level is None or lvl is level]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ["MemorySink"]
